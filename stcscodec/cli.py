"""
A small user interface for reading and writing STC-S.

STC-S comes from the command line arguments (joined by blanks) or, if
there are none, from stdin.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import sys
import textwrap

import stcscodec
from stcscodec import config
from stcscodec import logger


def _getSource(args):
	if args:
		return " ".join(args)
	return sys.stdin


def _makeChannel(opts, source, **kwargs):
	return stcscodec.StcsChannel(source, sink=sys.stdout, full=opts.full,
		reportLevel=opts.reportLevel, **kwargs)


def _printWarnings(channel):
	for warning in channel.getWarnings():
		print("Warning (level %d): %s"%(warning.level, warning.message))


def _formatProps(tree):
	lines = []
	for key in stcscodec.subphraseKeys:
		if key in tree:
			lines.append("%s:"%key)
			for name, val in tree[key].items():
				lines.append("  %s = %s"%(name, val))
	return "\n".join(lines)


def _describeRegion(reg, indent=""):
	if reg is None:
		return indent+"(none)"
	desc = "%s%r"%(indent, reg)
	lbnd, ubnd = reg.getBounds()
	desc += "\n%s  bounds: %s .. %s"%(indent, lbnd, ubnd)
	if reg.fillFactor is not None:
		desc += "\n%s  fill factor: %s"%(indent, reg.fillFactor)
	if reg.uncertainty is not None:
		desc += "\n%s  uncertainty: %r"%(indent, reg.uncertainty)
	return desc


def cmd_parse(opts, *args):
	"""[<stcs>] -- parse STC-S and print properties, area and coords.
	"""
	channel = _makeChannel(opts, _getSource(args), wantArea=True,
		wantCoords=True, wantProps=True)
	res = channel.read()
	print(_formatProps(res["PROPS"]))
	print("Area:\n"+_describeRegion(res.get("AREA"), "  "))
	print("Coords:\n"+_describeRegion(res.get("COORDS"), "  "))
	_printWarnings(channel)


def cmd_props(opts, *args):
	"""[<stcs>] -- parse STC-S and print the property tree.
	"""
	channel = _makeChannel(opts, _getSource(args), wantArea=False,
		wantCoords=False, wantProps=True)
	print(_formatProps(channel.read()))


def cmd_roundtrip(opts, *args):
	"""[<stcs>] -- parse STC-S and write it out again.
	"""
	channel = _makeChannel(opts, _getSource(args), wantArea=True,
		wantCoords=True, wantProps=True)
	res = channel.read()
	_printWarnings(channel)
	if not channel.write(res):
		_printWarnings(channel)
		raise stcscodec.STCSWriteError("Could not write STC-S",
			channel.warnings)


def makeParser():
	from optparse import OptionParser
	parser = OptionParser(usage="%prog [options] <command> {<command-args}\n"
		"  Use command 'help' to see commands available.")
	parser.add_option("-f", "--full", help="Also write fields that only"
		" contain default values.", dest="full", default=False,
		action="store_true")
	parser.add_option("-r", "--report-level", help="Report warnings up to"
		" this level (1..3).", dest="reportLevel", type="int", default=None,
		action="store")
	parser.add_option("--debug", help="Dump exceptions and log debug"
		" messages.", dest="debug", default=False, action="store_true")
	return parser

_cmdArgParser = makeParser()


def cmd_help(opts):
	""" -- outputs help to stdout.
	"""
	_cmdArgParser.print_help(file=sys.stderr)
	sys.stderr.write("\nCommands include:\n")
	for name in sorted(globals()):
		if name.startswith("cmd_"):
			sys.stderr.write("%s %s\n"%(name[4:],
				globals()[name].__doc__.strip()))


def parseArgs(argv=None):
	opts, args = _cmdArgParser.parse_args(argv)
	if not args:
		cmd_help(opts)
		sys.exit(1)
	return opts, args[0], args[1:]


def bailOnExc(opts, msg, hint=None):
	import traceback
	if opts.debug:
		traceback.print_exc()
	sys.stderr.write(textwrap.fill(msg, replace_whitespace=True,
		initial_indent='', subsequent_indent="  ")+"\n")
	if hint:
		sys.stderr.write(textwrap.fill("Hint: "+hint, replace_whitespace=True,
			initial_indent='', subsequent_indent="  ")+"\n")
	sys.exit(1)


def main(argv=None):
	opts, cmd, args = parseArgs(argv)
	if opts.debug:
		config.setConfig("logLevel", "debug")
	logger.setLogLevel(config.getConfig("logLevel"))
	try:
		handler = globals()["cmd_"+cmd]
	except KeyError:
		bailOnExc(opts, "Unknown command: %s."%cmd)
	try:
		handler(opts, *args)
	except stcscodec.STCSParseError as ex:
		bailOnExc(opts, "STC-S expression '%s' bad somewhere after %s (%s)"%(
			ex.expr, ex.pos, ex.msg), ex.hint)
	except stcscodec.STCSWriteError as ex:
		bailOnExc(opts, "Cannot write STC-S: %s"%"; ".join(
			str(w) for w in ex.warnings), ex.hint)
	except stcscodec.STCNotImplementedError as ex:
		bailOnExc(opts, "Feature not yet supported: %s"%ex, ex.hint)
	except stcscodec.STCError as ex:
		bailOnExc(opts, "Bad value in STC input: %s"%ex, ex.hint)


if __name__=="__main__":
	main()
