"""
The TypeScript declarations which give the generated parser its public shape.

Most of this is fixed text describing the runtime objects every generated parser
carries: positions, ranges, the five kinds of expectation, the syntax error class,
and the tracer. A few pieces depend on configuration: the error class's exported
name and whether the tracer gets exported at all.

Rather than one large literal, the declarations are kept in named slots. The slots
render independently, which makes each one easy to inspect, and the emission order
is determined by the order of the slots.
"""

import json
from .interfaces import PARSER_BINDING, DEFAULT_ERROR_NAME

EXPECTATION_VARIANTS = ('LiteralExpectation', 'ClassExpectation', 'AnyExpectation', 'EndExpectation', 'OtherExpectation')

FIXED = {
	'FilePosition': """export interface FilePosition {
  offset: number;
  line: number;
  column: number;
}""",
	'FileRange': """export interface FileRange {
  start: FilePosition;
  end: FilePosition;
  source: string;
}""",
	'LiteralExpectation': """export interface LiteralExpectation {
  type: "literal";
  text: string;
  ignoreCase: boolean;
}""",
	'ClassParts': """export interface ClassParts extends Array<string | ClassParts> {}""",
	'ClassExpectation': """export interface ClassExpectation {
  type: "class";
  parts: ClassParts;
  inverted: boolean;
  ignoreCase: boolean;
}""",
	'AnyExpectation': """export interface AnyExpectation {
  type: "any";
}""",
	'EndExpectation': """export interface EndExpectation {
  type: "end";
}""",
	'OtherExpectation': """export interface OtherExpectation {
  type: "other";
  description: string;
}""",
	'Expectation': "export type Expectation = %s;"%" | ".join(EXPECTATION_VARIANTS),
	'_PeggySyntaxError': """declare class _PeggySyntaxError extends Error {
  public static buildMessage(expected: Expectation[], found: string | null): string;
  public message: string;
  public expected: Expectation[];
  public found: string | null;
  public location: FileRange;
  public name: string;
  constructor(message: string, expected: Expectation[], found: string | null, location: FileRange);
  format(sources: {
    grammarSource?: string;
    text: string;
  }[]): string;
}""",
	'TraceEvent': """export interface TraceEvent {
  type: string;
  rule: string;
  result?: unknown;
  location: FileRange;
}""",
	'ParserTracer': """export interface ParserTracer {
  trace(event: TraceEvent): void;
}""",
	'_DefaultTracer': """declare class _DefaultTracer implements ParserTracer {
  private indentLevel: number;
  public trace(event: TraceEvent): void;
}""",
}

PARSE_SIGNATURE = {
	'ParseOptions': """export interface ParseOptions {
  filename?: string;
  startRule?: string;
  tracer?: ParserTracer;
  [key: string]: unknown;
}""",
	'ParseFunction': "export type ParseFunction = (input: string, options?: ParseOptions) => any;",
	'parse': "export const parse: ParseFunction = %s.parse;"%PARSER_BINDING,
}

# The destructured holder opens with this, so the generated expression that follows gets bound to a name.
HOLDER_PREFIX = "const %s: {parse: any, SyntaxError: any, DefaultTracer?: any} = "%PARSER_BINDING


class Declarations:
	"""
	Slot-keyed builder for everything the typing pass appends after the wrapped code.
	The error name is assumed to be validated already; see `generate.check_error_name`.
	"""
	def __init__(self, error_name:str=DEFAULT_ERROR_NAME, trace:bool=False):
		self.error_name = error_name
		self.trace = trace
		self.dynamic = {
			'rename': "%s.SyntaxError.prototype.name = %s;"%(PARSER_BINDING, json.dumps(error_name)),
			**PARSE_SIGNATURE,
			'export_error': "export const %s = %s.SyntaxError as typeof _PeggySyntaxError;"%(error_name, PARSER_BINDING),
		}
		if trace:
			self.dynamic['export_tracer'] = "export const DefaultTracer = %s.DefaultTracer as typeof _DefaultTracer;"%PARSER_BINDING

	def slots(self) -> list[str]:
		return list(FIXED) + list(self.dynamic)

	def render(self, slot:str) -> str:
		if slot in FIXED: return FIXED[slot]
		return self.dynamic[slot]

	def chunks(self) -> list[str]:
		"""
		The fragments to append to the root, in order:
			the fixed type library,
			the rename statement,
			the parse function and its signature,
			the exported error class,
			and the exported tracer if tracing is on.
		"""
		parts = [
			"\n" + "\n\n".join(FIXED.values()) + "\n\n",
			self.dynamic['rename'] + "\n",
			"\n" + "\n".join(PARSE_SIGNATURE.values()) + "\n",
			"\n" + self.dynamic['export_error'] + "\n",
		]
		if self.trace: parts.append("\n" + self.dynamic['export_tracer'] + "\n")
		return parts

	def exported_names(self) -> list[str]:
		"""
		Names a consumer of the typed module can import. Only `export` slots count;
		the underscore classes are declarations in support of the casts.
		"""
		names = [slot for slot in FIXED if not slot.startswith('_')]
		names.extend(['ParseOptions', 'ParseFunction', 'parse', self.error_name])
		if self.trace: names.append('DefaultTracer')
		return names
