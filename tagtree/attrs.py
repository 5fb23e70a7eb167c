# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Attribute data model, the attribute constructor catalog, and the merge rule applied at render time.
Ref: https://html.spec.whatwg.org/multipage/syntax.html#attributes-2.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .exceptions import InvalidAttr


class AttrKind(Enum):
  NONE = 'none' # Renders nothing.
  BOOLEAN = 'boolean' # Renders the bare name, e.g. `defer`.
  QUOTED = 'quoted' # Renders `name="v0 v1"`.


NONE = AttrKind.NONE
BOOLEAN = AttrKind.BOOLEAN
QUOTED = AttrKind.QUOTED


@dataclass(frozen=True)
class Attr:
  '''
  An immutable attribute. `values` are space-delimited when rendered.
  Construct with `attr()` or the catalog functions below rather than directly.
  '''
  name:str
  values:tuple[str,...] = ()
  kind:AttrKind = QUOTED

  def __str__(self) -> str:
    match self.kind:
      case AttrKind.QUOTED: return f'{self.name}="{" ".join(self.values)}"'
      case AttrKind.BOOLEAN: return self.name
      case AttrKind.NONE: return ''
    raise ValueError(self.kind)


def esc_attr_val(text:str) -> str:
  'Escape a value for a double-quoted attribute. Quoted values are rendered verbatim, so callers apply this to untrusted input.'
  text = text.replace('&', '&amp;') # Ampersand must be replaced first, because escapes use ampersands.
  text = text.replace('<', '&lt;')
  text = text.replace('"', '&quot;')
  return text


def attr(name:str, kind:AttrKind, *values:str) -> Attr:
  'The primitive attribute constructor.'
  if kind is not NONE and not name:
    raise InvalidAttr(f'attribute of kind {kind.name} requires a name')
  if kind is BOOLEAN and values:
    raise InvalidAttr(f'boolean attribute {name!r} cannot have values: {values!r}')
  for v in values:
    if not isinstance(v, str): raise InvalidAttr(f'attribute {name!r} value must be `str`; received: {v!r}')
  return Attr(name=name, values=values, kind=kind)


def merge_attrs(attrs:Iterable[Attr]) -> list[Attr]:
  '''
  Combine attributes that share a name into one attribute per name.
  The result is ordered by first occurrence, and each value list is the concatenation of all occurrences in order.
  `NONE` attributes are dropped and do not reserve a name.
  When kinds conflict, the first kind encountered wins.
  '''
  merged:dict[str,Attr] = {} # Dicts preserve insertion order, which gives first-occurrence order.
  for a in attrs:
    if a.kind is NONE: continue
    try: existing = merged[a.name]
    except KeyError: merged[a.name] = a
    else:
      if existing.kind is QUOTED:
        merged[a.name] = Attr(name=a.name, values=existing.values + a.values, kind=QUOTED)
  return list(merged.values())


def fmt_attrs(attrs:Iterable[Attr]) -> str:
  'Return a string that is either empty or with a leading space, containing all of the merged attributes.'
  return ''.join(f' {a}' for a in merge_attrs(attrs))


# Catalog.

def class_names(*values:str) -> Attr: return attr('class', QUOTED, *values)

def id_(*values:str) -> Attr: return attr('id', QUOTED, *values)

def name(*values:str) -> Attr: return attr('name', QUOTED, *values)

def type_(*values:str) -> Attr: return attr('type', QUOTED, *values)

def value(*values:str) -> Attr: return attr('value', QUOTED, *values)

def src(*values:str) -> Attr: return attr('src', QUOTED, *values)

def href(*values:str) -> Attr: return attr('href', QUOTED, *values)

def rel(*values:str) -> Attr: return attr('rel', QUOTED, *values)

def lang(*values:str) -> Attr: return attr('lang', QUOTED, *values)

def charset(value:str) -> Attr: return attr('charset', QUOTED, value)

def placeholder(value:str) -> Attr: return attr('placeholder', QUOTED, value)

def for_(value:str) -> Attr: return attr('for', QUOTED, value)

def action(value:str) -> Attr: return attr('action', QUOTED, value)

def method(value:str) -> Attr: return attr('method', QUOTED, value)

def defer() -> Attr: return attr('defer', BOOLEAN)

def checked() -> Attr: return attr('checked', BOOLEAN)

def required() -> Attr: return attr('required', BOOLEAN)

def disabled() -> Attr: return attr('disabled', BOOLEAN)

def no_attr() -> Attr: return attr('', NONE)


def is_checked(flag:bool) -> Attr:
  'Return the `checked` attribute if `flag` is true; otherwise an attribute that renders nothing.'
  return checked() if flag else no_attr()
