"""
Configuration for the typing pass.

The upstream plugin convention nests the pass's own settings under a `tspegjs` key,
beside the generator's `trace` flag:

	{"trace": true, "tspegjs": {"customHeader": "import a from 'b';", "errorName": "MySyntaxError"}}

That shape is accepted from a mapping or a JSON file. Inside Python, it's an Options tuple.
"""

import json
from typing import NamedTuple, Optional
from .interfaces import DEFAULT_ERROR_NAME, OptionsError

PLUGIN_KEY = 'tspegjs'

class Options(NamedTuple):
	custom_header: Optional[str] = None
	error_name: str = DEFAULT_ERROR_NAME
	trace: bool = False

	@classmethod
	def from_mapping(cls, mapping:dict) -> "Options":
		if not isinstance(mapping, dict): raise OptionsError("Options must be a mapping; got %s."%type(mapping).__name__)
		plugin = mapping.get(PLUGIN_KEY) or {}
		if not isinstance(plugin, dict): raise OptionsError("The %r options must be a mapping."%PLUGIN_KEY)
		return cls.of(
			custom_header=plugin.get('customHeader'),
			error_name=plugin.get('errorName'),
			trace=mapping.get('trace'),
		)

	@classmethod
	def of(cls, *, custom_header=None, error_name=None, trace=None) -> "Options":
		""" Build from possibly-absent settings, filling in the defaults. A blank error name means the default. """
		_expect(custom_header, str, 'customHeader')
		_expect(error_name, str, 'errorName')
		_expect(trace, bool, 'trace')
		return cls(custom_header or None, error_name or DEFAULT_ERROR_NAME, bool(trace))

	def overridden(self, *, custom_header=None, error_name=None, trace=None) -> "Options":
		""" Settings given here (not None) take precedence. The command line uses this over a config file. """
		return Options.of(
			custom_header=self.custom_header if custom_header is None else custom_header,
			error_name=self.error_name if error_name is None else error_name,
			trace=self.trace if trace is None else trace,
		)

def _expect(value, kind, key):
	if value is not None and not isinstance(value, kind):
		raise OptionsError("Option %r should be %s; got %r."%(key, kind.__name__, value))

def load_options(path) -> Options:
	try:
		with open(path) as fh: mapping = json.load(fh)
	except OSError as e:
		raise OptionsError("Could not read options file %s: %s"%(path, e.strerror)) from None
	except json.JSONDecodeError as e:
		raise OptionsError("Options file %s is not valid JSON: %s"%(path, e)) from None
	return Options.from_mapping(mapping)
