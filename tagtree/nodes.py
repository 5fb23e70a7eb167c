# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Content node types: raw `Text` and `Element`.

Unlike `xml.etree.ElementTree.Element`, child nodes and text are interleaved in a single ordered tuple.
Nodes are frozen and never hold a reference to a parent, so trees are acyclic and can be rendered any number of times.
Build nodes with the constructors in `tagtree.tags` rather than directly.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .attrs import Attr


class Voidness(Enum):
  VOID = 'void'
  NON_VOID = 'non-void'


VOID = Voidness.VOID
NON_VOID = Voidness.NON_VOID


@dataclass(frozen=True)
class Text:
  'Raw text, written verbatim. No escaping is performed; see `esc_text` and `escaped_text`.'
  value:str


@dataclass(frozen=True)
class Element:
  tag:str
  voidness:Voidness = NON_VOID
  attrs:tuple[Attr,...] = ()
  children:tuple['Content',...] = ()

  @property
  def is_void(self) -> bool: return self.voidness is VOID

  def __str__(self) -> str:
    words = ''.join(f' {a}' for a in self.attrs if str(a))
    return f'<{self.tag}:{words} ({len(self.children)} children)>'


Content = Union[Text,Element]

content_classes = (Text, Element)


def raw_text(text:str) -> Text:
  return Text(text)


def esc_text(text:str) -> str:
  text = text.replace('&', '&amp;') # Ampersand must be replaced first, because escapes use ampersands.
  text = text.replace('<', '&lt;')
  # Note: we do not replace '>' because it is not required and helpful to leave unescaped for embedded CSS.
  return text


def escaped_text(text:str) -> Text:
  'Escape `text` for use as element content, and wrap it as a `Text` node.'
  return Text(esc_text(text))
