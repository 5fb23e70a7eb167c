# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
htmx attributes. These are plain data built with `attr`; no validation beyond the generic attribute rules is performed.
See:
* https://htmx.org/reference/#attributes
* https://htmx.org/attributes/hx-on/
* https://htmx.org/reference/#events
'''

import re

from .attrs import Attr, attr, QUOTED


def hx_get(url:str) -> Attr: return attr('hx-get', QUOTED, url)

def hx_post(url:str) -> Attr: return attr('hx-post', QUOTED, url)

def hx_put(url:str) -> Attr: return attr('hx-put', QUOTED, url)

def hx_delete(url:str) -> Attr: return attr('hx-delete', QUOTED, url)

def hx_target(value:str) -> Attr: return attr('hx-target', QUOTED, value)

def hx_swap(value:str) -> Attr: return attr('hx-swap', QUOTED, value)


def hx_on(event:str, expr:str) -> Attr:
  '''
  Inline event handler attribute: `hx-on:{event}="{expr}"`.
  DOM events such as 'click' are used as-is.
  htmx events given in their camelCase form (e.g. 'afterRequest', 'validation:failed') are converted to the
  abbreviated kebab form that HTML attribute names require, e.g. 'hx-on::after-request'.
  All other names, including kebab forms and custom events, are used as-is; see `hx_on_verbatim` to bypass the conversion.
  '''
  try: event = '::' + htmx_kebab_events[event]
  except KeyError: event = ':' + event
  return attr('hx-on' + event, QUOTED, expr)


def hx_on_verbatim(event:str, expr:str) -> Attr:
  '`hx-on:{event}="{expr}"` with the event name written as given, for custom events that share a name with an htmx event.'
  return attr('hx-on:' + event, QUOTED, expr)


def kebab_event(event:str) -> str:
  'Convert a camelCase htmx event name to the kebab form, e.g. `xhr:loadStart` -> `xhr-load-start`.'
  return _camel_hump_re.sub('-', event).replace(':', '-').lower()

_camel_hump_re = re.compile(r'(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


htmx_events = [
  'abort',
  'afterOnLoad',
  'afterProcessNode',
  'afterRequest',
  'afterSettle',
  'afterSwap',
  'beforeCleanupElement',
  'beforeHistorySave',
  'beforeOnLoad',
  'beforeProcessNode',
  'beforeRequest',
  'beforeSend',
  'beforeSwap',
  'beforeTransition',
  'configRequest',
  'confirm',
  'historyCacheError',
  'historyCacheMiss',
  'historyCacheMissError',
  'historyCacheMissLoad',
  'historyRestore',
  'load',
  'noSSESourceError',
  'onLoadError',
  'oobAfterSwap',
  'oobBeforeSwap',
  'oobErrorNoTarget',
  'prompt',
  'pushedIntoHistory',
  'responseError',
  'sendError',
  'sseError',
  'sseOpen',
  'swapError',
  'targetError',
  'timeout',
  'validation:failed',
  'validation:halted',
  'validation:validate',
  'xhr:abort',
  'xhr:loadend',
  'xhr:loadstart',
  'xhr:progress',
]

# Only names whose kebab form differs are mapped; single-word names like 'load' are ambiguous with DOM events.
htmx_kebab_events = { e : kebab_event(e) for e in htmx_events if kebab_event(e) != e }
