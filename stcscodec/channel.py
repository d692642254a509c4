"""
The STC-S channel: reading and writing STC-S through line sources and
sinks.

A StcsChannel is configured with a source (where STC-S text comes from),
a sink (where written lines go), and the read and write options.  Options
not given are taken from the configuration (see config).

After each read or write, the channel's warnings attribute contains the
STCSWarnings produced; warnings with levels at or below the report level
are also passed on to events.ui.notifyWarning (and hence logged).
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

from stcscodec import config
from stcscodec import events
from stcscodec import stcsast
from stcscodec import stcsgen
from stcscodec import stcsparse
from stcscodec import wordctx
from stcscodec.common import *


def makeLineSink(sink):
	"""returns a callable taking one line for sink.

	sink can be a callable, an object with a write method (a newline is
	appended to each line), or an object with an append method.
	"""
	if hasattr(sink, "write"):
		return lambda line: sink.write(line+"\n")
	elif hasattr(sink, "append"):
		return sink.append
	elif callable(sink):
		return sink
	raise STCValueError("Cannot use %r as an STC-S sink"%sink)


def _fromConfig(value, section, name):
	if value is None:
		return config.getConfig(section, name)
	return value


class StcsChannel(object):
	"""is a reader and writer of STC-S.

	read() returns the area, the coords, the property tree, or a dict
	with the keys AREA, COORDS, and PROPS, for what the want* options
	select and the description yields.
	write(obj) writes obj as STC-S to the sink and returns True, or False
	if obj cannot be written (the reasons are in warnings then).

	Without a sink, written lines are collected in the lines attribute.
	"""
	def __init__(self, source=None, sink=None, wantArea=None,
			wantCoords=None, wantProps=None, full=None, reportLevel=None):
		self.source = source
		self.lines = []
		if sink is None:
			sink = self.lines
		self.sink = makeLineSink(sink)
		self.wantArea = _fromConfig(wantArea, "read", "area")
		self.wantCoords = _fromConfig(wantCoords, "read", "coords")
		self.wantProps = _fromConfig(wantProps, "read", "props")
		self.full = _fromConfig(full, "write", "full")
		self.reportLevel = _fromConfig(reportLevel, "general", "reportLevel")
		self.warnings = []

	def _addWarning(self, level, message):
		warning = STCSWarning(level, message)
		self.warnings.append(warning)

	def _reportWarnings(self):
		for warning in self.warnings:
			if warning.level<=self.reportLevel:
				events.ui.notifyWarning(warning)

	def getWarnings(self, maxLevel=None):
		"""returns the warnings of the last operation with levels up to
		maxLevel (default: the report level).
		"""
		if maxLevel is None:
			maxLevel = self.reportLevel
		return [w for w in self.warnings if w.level<=maxLevel]

	def read(self, source=None):
		"""reads one STC-S description from source (or the channel's source)
		and returns what the want* options select.

		Parse errors are raised as STCSParseError or STCNotImplementedError.
		"""
		self.warnings = []
		if source is None:
			source = self.source
		if source is None:
			raise STCValueError("No source to read STC-S from")

		try:
			subphrases = stcsparse.parseSubphrases(
				wordctx.WordContext(source), self._addWarning)
			return stcsast.assemble(subphrases, self.wantArea, self.wantCoords,
				self.wantProps)
		finally:
			self._reportWarnings()

	def write(self, obj):
		"""writes obj as STC-S to the sink.

		obj can be a region, a property tree, or a dict as returned by
		read().  The method returns True if something was written.
		"""
		self.warnings = []
		try:
			lines = stcsgen.getSTCSLines(obj, self.full,
				config.getConfig("write", "defaultDigits"), self.warnings)
		except STCSWriteError as ex:
			self._reportWarnings()
			events.ui.notifyError("STC-S not written: %s"%ex.msg)
			return False
		self._reportWarnings()

		for line in lines:
			self.sink(line)
		events.ui.notifyInfo("Wrote %d line(s) of STC-S"%len(lines))
		return bool(lines)


def parseSTCS(text, wantArea=True, wantCoords=False, wantProps=False,
		reportLevel=None):
	"""returns the result of reading the STC-S description text.

	See StcsChannel.read.
	"""
	return StcsChannel(text, wantArea=wantArea, wantCoords=wantCoords,
		wantProps=wantProps, reportLevel=reportLevel).read()


def getSTCS(obj, full=False):
	"""returns STC-S for obj (see StcsChannel.write).

	If obj cannot be written, an STCSWriteError is raised.
	"""
	warnings = []
	lines = stcsgen.getSTCSLines(obj, full,
		config.getConfig("write", "defaultDigits"), warnings)
	for warning in warnings:
		events.ui.notifyWarning(warning)
	return "\n".join(lines)
