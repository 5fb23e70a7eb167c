# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Builder DSL: curried tag constructors.

Each constructor binds a tag name, voidness, and attributes, and returns a `TagBuilder`;
calling the builder with children yields the finished `Element`:

  Div(class_names('main'))(P()(raw_text('Hi.')))

Void constructors (`Input`, `Meta`, etc.) apply the empty children call themselves and return the `Element`.
'''

from dataclasses import dataclass

from .attrs import Attr
from .exceptions import UnrecognizedContentKind, VoidContentError
from .nodes import Content, content_classes, Element, NON_VOID, VOID, Voidness
from .semantics import void_tags


@dataclass(frozen=True)
class TagBuilder:
  tag:str
  voidness:Voidness
  attrs:tuple[Attr,...]

  def __call__(self, *children:Content) -> Element:
    if self.voidness is VOID and children:
      raise VoidContentError(self.tag, children)
    for c in children:
      if not isinstance(c, content_classes): raise UnrecognizedContentKind(c)
    return Element(tag=self.tag, voidness=self.voidness, attrs=self.attrs, children=children)


def make_tag(name:str, voidness:Voidness, *attrs:Attr) -> TagBuilder:
  'The generic two-stage constructor.'
  return TagBuilder(tag=name, voidness=voidness, attrs=attrs)


def tag(name:str, *attrs:Attr) -> TagBuilder:
  'Create a builder for an arbitrary tag, choosing voidness from the HTML void tags.'
  return make_tag(name, (VOID if name in void_tags else NON_VOID), *attrs)


# Document.

def Html(*attrs:Attr) -> TagBuilder: return make_tag('html', NON_VOID, *attrs)

def Head(*attrs:Attr) -> TagBuilder: return make_tag('head', NON_VOID, *attrs)

def Body(*attrs:Attr) -> TagBuilder: return make_tag('body', NON_VOID, *attrs)

def Title(*attrs:Attr) -> TagBuilder: return make_tag('title', NON_VOID, *attrs)

def Script(*attrs:Attr) -> TagBuilder: return make_tag('script', NON_VOID, *attrs)

def Style(*attrs:Attr) -> TagBuilder: return make_tag('style', NON_VOID, *attrs)

def Meta(*attrs:Attr) -> Element: return make_tag('meta', VOID, *attrs)()

def Link(*attrs:Attr) -> Element: return make_tag('link', VOID, *attrs)()

# Flow.

def Div(*attrs:Attr) -> TagBuilder: return make_tag('div', NON_VOID, *attrs)

def Span(*attrs:Attr) -> TagBuilder: return make_tag('span', NON_VOID, *attrs)

def P(*attrs:Attr) -> TagBuilder: return make_tag('p', NON_VOID, *attrs)

def A(*attrs:Attr) -> TagBuilder: return make_tag('a', NON_VOID, *attrs)

def H1(*attrs:Attr) -> TagBuilder: return make_tag('h1', NON_VOID, *attrs)
def H2(*attrs:Attr) -> TagBuilder: return make_tag('h2', NON_VOID, *attrs)
def H3(*attrs:Attr) -> TagBuilder: return make_tag('h3', NON_VOID, *attrs)

def Ul(*attrs:Attr) -> TagBuilder: return make_tag('ul', NON_VOID, *attrs)

def Li(*attrs:Attr) -> TagBuilder: return make_tag('li', NON_VOID, *attrs)

def Br(*attrs:Attr) -> Element: return make_tag('br', VOID, *attrs)()

def Hr(*attrs:Attr) -> Element: return make_tag('hr', VOID, *attrs)()

def Img(*attrs:Attr) -> Element: return make_tag('img', VOID, *attrs)()

# Forms.

def Form(*attrs:Attr) -> TagBuilder: return make_tag('form', NON_VOID, *attrs)

def Label(*attrs:Attr) -> TagBuilder: return make_tag('label', NON_VOID, *attrs)

def Button(*attrs:Attr) -> TagBuilder: return make_tag('button', NON_VOID, *attrs)

def Input(*attrs:Attr) -> Element: return make_tag('input', VOID, *attrs)()

# Tables.

def Table(*attrs:Attr) -> TagBuilder: return make_tag('table', NON_VOID, *attrs)

def Tr(*attrs:Attr) -> TagBuilder: return make_tag('tr', NON_VOID, *attrs)

def Th(*attrs:Attr) -> TagBuilder: return make_tag('th', NON_VOID, *attrs)

def Td(*attrs:Attr) -> TagBuilder: return make_tag('td', NON_VOID, *attrs)
