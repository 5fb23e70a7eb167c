# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from io import StringIO

from tagtree.logfmt import Diagnostics, DiscardSink, logfmt, logfmt_items, logfmt_key, logfmt_val


def test_keys() -> None:
  assert logfmt_key('tag') == 'tag'
  assert logfmt_key('a b=c"d') == 'a_b_c_d'
  assert logfmt_key('') == '_'


def test_vals() -> None:
  assert logfmt_val(True) == 'true'
  assert logfmt_val(False) == 'false'
  assert logfmt_val(None) == ''
  assert logfmt_val(42) == '42'
  assert logfmt_val('') == '""'
  assert logfmt_val('a b') == '"a b"'
  assert logfmt_val('say "hi"') == '"say \\"hi\\""'
  assert logfmt_val('x\ny') == 'x\\ny'


def test_items() -> None:
  assert logfmt(tag='div', bytes=11) == 'tag=div bytes=11'
  assert logfmt_items({'k': 'v w'}) == 'k="v w"'


def test_diagnostics() -> None:
  log = StringIO()
  d = Diagnostics(log)
  d.info('element written', tag='div', bytes=11)
  d.error('render failed', tag='', bytes=0)
  assert log.getvalue() == 'level=INFO msg="element written" tag=div bytes=11\nlevel=ERROR msg="render failed" tag="" bytes=0\n'


def test_discard() -> None:
  d = Diagnostics()
  assert isinstance(d.file, DiscardSink)
  d.info('ignored')
  assert DiscardSink().write('x') == 0
