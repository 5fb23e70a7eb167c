# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
tagtree builds HTML documents from composable constructor functions and renders them to text.

  from tagtree import *
  page = Html(lang('en'))(Body()(Div(class_names('container'))(raw_text('Hello World!'))))
  render(page, sys.stdout, indent=True)
'''

from .attrs import (action, Attr, attr, AttrKind, BOOLEAN, charset, checked, class_names, defer, disabled, esc_attr_val,
  fmt_attrs, for_, href, id_, is_checked, lang, merge_attrs, method, name, no_attr, NONE, placeholder, QUOTED, rel,
  required, src, type_, value)
from .config import BuildConfig, DEFAULT_INDENT
from .exceptions import InvalidAttr, RenderError, SinkMissing, UnrecognizedContentKind, VoidContentError, WriteFailure
from .htmx import hx_delete, hx_get, hx_on, hx_on_verbatim, hx_post, hx_put, hx_swap, hx_target
from .logfmt import Diagnostics, DiscardSink
from .nodes import Content, Element, esc_text, escaped_text, NON_VOID, raw_text, Text, VOID, Voidness
from .render import render, render_bytes, render_chunks, render_config, render_str, RenderResult
from .tags import (A, Body, Br, Button, Div, Form, H1, H2, H3, Head, Hr, Html, Img, Input, Label, Li, Link, make_tag, Meta,
  P, Script, Span, Style, Table, TagBuilder, tag, Td, Th, Title, Tr, Ul)
