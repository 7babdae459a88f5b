"""
This file aggregates the design constants and exception types which TypeWrap deals in.

The pass speaks two languages at once. The code it wraps is whatever the parser
generator emitted, and is left alone. The code it adds is TypeScript, and the few
fixed bits of TypeScript that more than one module needs to agree upon live here.
"""

SUPPRESSION_MARKER = '// @ts-ignore\n' # Tells the type checker to ignore exactly the following line.
LINE_COMMENT = '//'
DISABLE_DIRECTIVE = '/* eslint-disable */\n\n'

DEFAULT_ERROR_NAME = 'PeggySyntaxError'
PARSER_BINDING = 'peggyParser' # The local name which the destructured holder binds.

class TypeWrapError(ValueError):
	""" Base class of all exceptions arising from the typing pass and its configuration. """

class MissingCodeError(TypeWrapError):
	"""
	The upstream compiler handed over a grammar with no generated code.
	That always means the generator was misconfigured or skipped a step.
	"""

class InvalidIdentifierError(TypeWrapError):
	"""
	Raised if the configured error-type name cannot be spliced into source as-is.
	Parameters are:
		the offending name.
		a picture of where it goes wrong, suitable for a text console.
	"""
	def __init__(self, message, name, illustration=''):
		super().__init__(message)
		self.name, self.illustration = name, illustration

class OptionsError(TypeWrapError):
	""" Configuration was malformed: wrong types, unreadable files, or conflicting settings. """
