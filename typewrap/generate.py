"""
The typing pass: turn the untyped code tree from a parser generator into a TypeScript module.

Outside-in, the result looks like this:

	/* eslint-disable */
	<custom header, if any>
	const peggyParser: {...} = <the generated code, with a suppression marker before each line>
	<the fixed type library>
	<the typed re-exports: parse, the syntax error class, maybe the tracer>

The generated code itself is never altered. It gets a private copy, interleaved with
markers and re-parented twice over, but the text of every original fragment survives
in its original order.

All configuration is checked before any tree gets touched, so a caller who catches
an error is still holding the very tree they passed in.
"""

import json, re
from .interfaces import DISABLE_DIRECTIVE, DEFAULT_ERROR_NAME, MissingCodeError, InvalidIdentifierError
from .sourcenode import SourceNode
from .options import Options
from .annotate import annotate_lines, count_markers
from .declarations import Declarations, HOLDER_PREFIX
from .failureprone import illustration, first_difference

VERBOSE = False

JS_IDENTIFIER = re.compile(r'[A-Za-z_$][A-Za-z0-9_$]*')

def check_error_name(name:str, *, strict=False) -> str:
	"""
	Very basic test to make sure no horrible identifier has been passed in:
	the name must come back unchanged from a trip through a string literal.
	That catches quotes, backslashes, and control characters, and nothing else.
	With `strict`, the name must also have the shape of a plain identifier.
	"""
	quoted = json.dumps(name, ensure_ascii=False)
	if quoted[1:-1] != name:
		at = first_difference(quoted[1:-1], name)
		picture = illustration(quoted, at+1, prefix='\t', caption="does not survive quoting")
		raise InvalidIdentifierError("The errorName %s is not a valid Javascript identifier"%quoted, name, picture)
	if strict and not JS_IDENTIFIER.fullmatch(name):
		m = JS_IDENTIFIER.match(name)
		at = m.end() if m else 0
		picture = illustration(quoted, at+1, prefix='\t', caption="not allowed in an identifier")
		raise InvalidIdentifierError("The errorName %s is not a plain Javascript identifier"%quoted, name, picture)
	return name

def restructure(code:SourceNode, options:Options) -> SourceNode:
	"""
	Wrap `code` in a destructured holder under a fresh root, and put the directives up front.
	Prepends stack in reverse, so the disable directive (prepended last) comes first of all.
	"""
	root = SourceNode()
	holder = SourceNode()
	root.add(holder)
	holder.add(code)
	if options.custom_header: root.prepend(options.custom_header + '\n\n')
	root.prepend(DISABLE_DIRECTIVE)
	holder.prepend(HOLDER_PREFIX)
	return root

def wrap(code:SourceNode, options:Options=Options(), *, strict=False) -> SourceNode:
	""" Build and return the typed module around a copy of `code`. The argument is left untouched. """
	if code is None:
		raise MissingCodeError(
			"typewrap requires the parser generator to produce Javascript source code before continuing, "
			"but something went wrong and no generated source code was found"
		)
	error_name = check_error_name(options.error_name or DEFAULT_ERROR_NAME, strict=strict)
	code = code.copy()
	annotate_lines(code)
	root = restructure(code, options)
	declarations = Declarations(error_name, options.trace)
	root.add(declarations.chunks())
	if VERBOSE: report(code, declarations)
	return root

def generate_parser(grammar, options=None, session=None, *, strict=False):
	"""
	The typing pass in the shape a generator pipeline expects: it takes the grammar's
	output record and replaces its `code` with the typed module. Returns nothing.
	`options` may be an Options tuple or a mapping in the plugin shape.
	`session` is accepted for the pipeline's sake and not used.
	"""
	if options is None: options = Options()
	elif isinstance(options, dict): options = Options.from_mapping(options)
	grammar.code = wrap(getattr(grammar, 'code', None), options, strict=strict)

def report(code:SourceNode, declarations:Declarations):
	fragments = sum(1 for _ in code.fragments())
	markers = count_markers(code)
	print("Wrapped %d fragments of generated code; %d of those are suppression markers."%(fragments, markers))
	print("Declared %d slots, exporting: %s"%(len(declarations.slots()), ', '.join(declarations.exported_names())))
