# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from io import BytesIO, StringIO

from pytest import raises

from tagtree.config import BuildConfig, DEFAULT_INDENT, indent_level, is_binary_sink
from tagtree.logfmt import Diagnostics, DiscardSink


def test_indent_level() -> None:
  assert indent_level(False) is None
  assert indent_level(None) is None
  assert indent_level(True) == DEFAULT_INDENT == 4
  assert indent_level(0) == 0
  assert indent_level(255) == 255
  with raises(ValueError): indent_level(256)
  with raises(ValueError): indent_level(-1)
  with raises(TypeError): indent_level('2') # type: ignore[arg-type]


def test_from_opts_defaults() -> None:
  config = BuildConfig.from_opts()
  assert config.sink is None
  assert config.indent is None
  assert BuildConfig.from_opts(indent=0).indent == 0
  assert isinstance(config.diagnostics.file, DiscardSink)
  assert not config.diagnostics.is_enabled


def test_from_opts_diagnostics() -> None:
  log = StringIO()
  assert BuildConfig.from_opts(diagnostics=log).diagnostics.file is log
  diagnostics = Diagnostics(log)
  assert BuildConfig.from_opts(diagnostics=diagnostics).diagnostics is diagnostics


def test_binary_detection() -> None:
  assert is_binary_sink(BytesIO())
  assert not is_binary_sink(StringIO())
  assert BuildConfig.from_opts(sink=BytesIO()).is_binary
