# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A lightweight logfmt writer for render diagnostics.

Each record is one line of `key=value` pairs, beginning with `level` and `msg`, e.g.:
  level=INFO msg="element written" tag=html bytes=42

The format follows the logfmt implementation in Go:
https://pkg.go.dev/github.com/kr/logfmt#section-documentation
'''

from typing import Any, Iterable, Mapping, TextIO


def logfmt_key(key:str) -> str:
  '''
  Convert a key string into a valid logfmt key.
  Valid keys consist of any character greater than ' ', excluding '=' and '"'; other characters become '_'.
  '''
  if not key: return '_'
  return key.translate(_logfmt_key_trans)


_latin1 = tuple(chr(i) for i in range(256))

_logfmt_key_trans = str.maketrans(dict.fromkeys([c for c in _latin1 if (not c.isprintable() or c in ' "=')], '_'))


def logfmt_val(value:Any) -> str:
  if value is True: return 'true'
  if value is False: return 'false'
  if value is None: return ''
  if isinstance(value, (int, float)): return str(value)
  return logfmt_escape(str(value))


def logfmt_escape(value:str) -> str:
  if value == '': return '""'
  value = value.replace('\\', '\\\\')
  value = value.replace('"', '\\"')
  value = value.replace('\n', '\\n')
  if ' ' in value or '=' in value or '"' in value: value = f'"{value}"'
  return value


def logfmt_items(items:Iterable[tuple[str,Any]]|Mapping[str,Any]) -> str:
  'Format an iterable or mapping of parameters into a logfmt string.'
  if isinstance(items, Mapping): items = items.items()
  return ' '.join(f'{logfmt_key(k)}={logfmt_val(v)}' for k, v in items)


def logfmt(**kwargs:Any) -> str:
  return logfmt_items(kwargs)


class DiscardSink:
  'A text sink that performs no work and never fails.'

  def write(self, text:str) -> int: return 0

  def flush(self) -> None: pass


class Diagnostics:
  '''
  Writes logfmt records to a text stream.
  The default stream is a `DiscardSink`, for which records are not even formatted.
  '''

  def __init__(self, file:TextIO|DiscardSink|None=None) -> None:
    self.file = DiscardSink() if file is None else file

  @property
  def is_enabled(self) -> bool: return not isinstance(self.file, DiscardSink)

  def record(self, level:str, msg:str, **items:Any) -> None:
    if not self.is_enabled: return
    print(logfmt(level=level, msg=msg, **items), file=self.file) # type: ignore[arg-type]

  def info(self, msg:str, **items:Any) -> None: self.record('INFO', msg, **items)

  def error(self, msg:str, **items:Any) -> None: self.record('ERROR', msg, **items)
