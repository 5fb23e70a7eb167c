# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from pytest import raises

from tagtree.attrs import checked, class_names
from tagtree.exceptions import UnrecognizedContentKind, VoidContentError
from tagtree.nodes import Element, NON_VOID, raw_text, Text, VOID
from tagtree.tags import Br, Div, Input, make_tag, tag, TagBuilder


def test_two_stage() -> None:
  builder = Div(class_names('a'))
  assert isinstance(builder, TagBuilder)
  el = builder(raw_text('x'))
  assert el == Element('div', NON_VOID, (class_names('a'),), (Text('x'),))


def test_empty() -> None:
  assert Div()() == Element('div', NON_VOID, (), ())


def test_fresh_nodes() -> None:
  builder = Div()
  assert builder() is not builder()


def test_void_preapplied() -> None:
  assert Input(checked()) == Element('input', VOID, (checked(),), ())
  assert Br().is_void


def test_void_children_rejected() -> None:
  with raises(VoidContentError): make_tag('input', VOID)(raw_text('x'))
  with raises(TypeError): tag('img')(Div()())


def test_unrecognized_child() -> None:
  with raises(UnrecognizedContentKind): Div()('bare str') # type: ignore[arg-type]


def test_tag_voidness() -> None:
  assert tag('meta').voidness is VOID
  assert tag('section').voidness is NON_VOID
