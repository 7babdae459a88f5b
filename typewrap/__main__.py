"""
Wrap the Javascript parser generated from a PEG grammar into a typed TypeScript module.

The input is the generator's output file. Every line of it is kept verbatim; the
result adds suppression markers, a typed binding around the generated code, and the
declarations which give the parser, its syntax error, and its tracer their types.
"""

import sys, os, argparse

from typewrap.generate import generate_parser
from typewrap.interfaces import TypeWrapError, InvalidIdentifierError, OptionsError
from typewrap.options import Options, load_options
from typewrap.sourcenode import SourceNode, GrammarOutput
from typewrap import generate, pretty

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m typewrap', description=__doc__,)
	parser.add_argument('source_path', help='path to the generated Javascript parser')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing file')
	parser.add_argument('-o', '--output', help='path to output file; defaults to the source path with a .ts extension')
	parser.add_argument('-c', '--config', help='JSON options file, in the {"trace": ..., "tspegjs": {...}} shape')
	parser.add_argument('--header', help='text to place near the top of the module, such as import statements')
	parser.add_argument('--header-file', help='file whose contents go near the top of the module')
	parser.add_argument('--error-name', help='exported name of the syntax error class (default PeggySyntaxError)')
	parser.add_argument('--trace', action='store_const', const=True, default=None, help='also export the DefaultTracer class')
	parser.add_argument('--strict-name', action='store_true', help='insist the error name is a plain identifier')
	parser.add_argument('--pretty', action='store_true', help='Display an outline of the resulting tree on STDOUT.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about what got wrapped and exported.")
	return parser.parse_args(argv)

def log_error(*parts):
	""" Simple place to override if you'd rather use a logging framework. """
	print(*parts, file=sys.stderr)

def read_text(path):
	with open(path, encoding='utf-8') as fh: return fh.read()

def gather_options(args) -> Options:
	if args.header is not None and args.header_file is not None:
		raise OptionsError("Give either --header or --header-file, not both.")
	options = load_options(args.config) if args.config else Options()
	custom_header = read_text(args.header_file).rstrip('\n') if args.header_file else args.header
	return options.overridden(custom_header=custom_header, error_name=args.error_name, trace=args.trace)

def main(args):
	if args.verbose: generate.VERBOSE = True
	stem, extension = os.path.splitext(args.source_path)
	target_path = args.output or stem+'.ts'
	if os.path.exists(target_path) and not args.force:
		log_error('Target file already exists and --force command-line argument was not given.')
		return 1
	try:
		options = gather_options(args)
		output = GrammarOutput(SourceNode.from_text(read_text(args.source_path), source=os.path.basename(args.source_path)))
		generate_parser(output, options, strict=args.strict_name)
	except InvalidIdentifierError as e:
		log_error(e.args[0])
		log_error(e.illustration)
		return 1
	except TypeWrapError as e:
		log_error(e.args[0])
		return 1
	except UnicodeDecodeError as e:
		log_error("Could not decode input as %s: %s"%(e.encoding, e.reason))
		return 1
	except OSError as e:
		log_error("Could not read %s: %s"%(e.filename, e.strerror))
		return 1
	if args.pretty: pretty.print_outline(output.code)
	try:
		with open(target_path, 'w', encoding='utf-8') as fh: fh.write(output.code.to_string())
	except OSError as e:
		log_error("Could not write %s: %s"%(target_path, e.strerror))
		return 1
	print('Wrote typed module to:')
	print('\t'+target_path)
	return 0

def run():
	sys.exit(main(parse_arguments()))

if __name__ == '__main__': run()
