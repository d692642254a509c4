"""
Parsing STC-S into sub-phrase records.

The parser is a state machine working on words from a WordContext.  Each
state has a handler taking the current word and returning the next state
and whether the word was consumed.  If a state cannot use the word, the
word is passed on to the next state ("tolerant lookahead"), usually after
issuing a warning that a default is being used.  Hard errors raise
STCSParseError.

The result of the parse is a dict mapping time, space, spectral and
redshift to SubPhrase instances; the regions for each sub-phrase are
built by stcsast when a sub-phrase is finished.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

from pyparsing import ParseException, Regex

from stcscodec import frames
from stcscodec import stcsast
from stcscodec import times
from stcscodec import units
from stcscodec.common import *


def getSymbols():
	"""returns a dictionary of pyparsing symbols for the STC-S literals.
	"""
	_exactNumericRE = r"[+-]?\d+(\.(\d+)?)?|[+-]?\.\d+"
	numberLiteral = Regex(r"(?i)(%s)([ED][+-]?\d+)?"%_exactNumericRE)
	isoTimeLiteral = Regex(r"\d\d\d\d-?\d\d-?\d\d(T\d\d:?\d\d:?\d\d(\.\d*)?Z?)?")
	return {
		"number": numberLiteral,
		"isoTime": isoTimeLiteral,
	}

getLiterals = CachedGetter(getSymbols)


def parseNumber(word):
	"""returns a float for an STC-S number literal or None if word is
	not a number.

	>>> parseNumber("1.5e3"), parseNumber("-.5"), parseNumber("2D2")
	(1500.0, -0.5, 200.0)
	>>> parseNumber("nan") is None, parseNumber("") is None
	(True, True)
	"""
	if not word:
		return None
	try:
		getLiterals()["number"].parse_string(word, parse_all=True)
	except ParseException:
		return None
	return float(word.upper().replace("D", "E"))


def isISOTime(word):
	"""returns True if word looks like an STC-S ISO time literal.
	"""
	try:
		getLiterals()["isoTime"].parse_string(word, parse_all=True)
	except ParseException:
		return False
	return True


# The parser states
TIME_IDENTIFIER = "timeIdentifier"
SPACE_IDENTIFIER = "spaceIdentifier"
VELOCITY_IDENTIFIER = "velocityIdentifier"
SPECTRAL_IDENTIFIER = "spectralIdentifier"
REDSHIFT_IDENTIFIER = "redshiftIdentifier"
FILL_FACTOR = "fillFactor"
TIME_SCALE = "timeScale"
FRAME = "frame"
REFPOS = "refPos"
FLAVOUR = "flavour"
START = "start"
STOP = "stop"
TIME_LABEL = "timeLabel"
TIME = "time"
POSITION_INTERVAL = "positionInterval"
ALLSKY = "allSky"
CIRCLE = "circle"
ELLIPSE = "ellipse"
BOX = "box"
POLYGON = "polygon"
CONVEX = "convex"
POSITION = "position"
POSITION_LABEL = "positionLabel"
LIMITS = "limits"
RED_SPEC_LABEL = "redSpecLabel"
RED_SPEC_VALUE = "redSpecValue"
TYPE_DOPPLER = "typeDoppler"
VELOCITY_VALUE = "velocityValue"
UNIT = "unit"
ERROR = "error"
RESOLUTION = "resolution"
SIZE = "size"
PIX_SIZE = "pixSize"
END = "end"

shapeStates = {
	"PositionInterval": POSITION_INTERVAL,
	"AllSky": ALLSKY,
	"Circle": CIRCLE,
	"Ellipse": ELLIPSE,
	"Box": BOX,
	"Polygon": POLYGON,
	"Convex": CONVEX,
	"Position": POSITION,
}

# the identifier state following each kind of sub-phrase
nextIdentifier = {
	"time": SPACE_IDENTIFIER,
	"space": VELOCITY_IDENTIFIER,
	"velocity": SPECTRAL_IDENTIFIER,
	"spectral": REDSHIFT_IDENTIFIER,
	"redshift": END,
}


class SubPhrase(object):
	"""is the scratch record for one sub-phrase.

	props is the sub-phrase's map in the property tree, frame the
	coordinate frame; the various value attributes are filled by the parser
	in the units given in the STC-S (times are absolute MJDs).  area and
	coords are set by stcsast when the sub-phrase is finished.
	"""
	def __init__(self, kind, id, frame=None):
		self.kind, self.id, self.frame = kind, id, frame
		self.props = {"ID": id}
		self.fill = None
		self.unit = None
		self.scale = 1.
		self.errors = None
		self.hasEnclosure = False
		self.area = self.coords = None

		self.epoch = None
		self.start = self.stop = self.value = None
		self.lolim = self.hilim = None
		self.centre = self.radius = self.radii = self.posAngle = None
		self.boxSize = self.vertices = None

		self.system = None
		self.frameWord = None
		self.isVelocity = True

	def __repr__(self):
		return "<SubPhrase %s %s>"%(self.kind, self.id)

	@property
	def naxes(self):
		if self.frame is None:
			return 1
		return self.frame.naxes

	@property
	def isSky(self):
		return isinstance(self.frame, frames.SkyFrame)


class STCSParser(object):
	"""is a parser for one STC-S description.

	Construct it with a WordContext and a callable receiving warnings
	(as level, message pairs); then call parse().
	"""
	def __init__(self, wordCtx, warn):
		self.words, self.warn = wordCtx, warn
		self.word = None
		self.current = None
		self.lastKind = "time"
		self.epoch = None
		self.subphrases = {}

	def getContext(self):
		return self.words.getContextSnippet()

	def _warn(self, level, msg):
		self.warn(level, "%s: '%s'."%(msg, self.getContext()))

	def _fail(self, msg, excClass=STCSParseError):
		ctx = self.getContext()
		msg = "%s: '%s'."%(msg, ctx)
		if excClass is STCSParseError:
			raise STCSParseError(msg, expr=ctx, pos=self.word)
		raise excClass(msg)

	def _advance(self):
		self.word = self.words.nextWord()
		if self.word is None:
			self.word = ""
		return self.word

	def parse(self):
		"""parses the description and returns a dict mapping sub-phrase
		kinds to SubPhrase instances.
		"""
		state = TIME_IDENTIFIER
		self.word = self.words.nextWord()
		while self.word is not None:
			state, consumed = getattr(self, "parse_"+state)(self.word)
			if consumed:
				self.word = self.words.nextWord()
		self._finishCurrent()
		return self.subphrases

	def _startSubphrase(self, kind, id, frame=None):
		self.current = SubPhrase(kind, id, frame)
		self.lastKind = kind
		if frame is not None:
			frame.epoch = self.epoch
		if kind!="velocity":
			self.subphrases[kind] = self.current

	def _finishCurrent(self):
		sub, self.current = self.current, None
		if sub is None or sub.kind=="velocity":
			return
		stcsast.finishSubphrase(sub)
		if sub.kind=="time" and sub.epoch is not None:
			self.epoch = sub.epoch

	############## identifiers

	def parse_timeIdentifier(self, word):
		if word in ["TimeInterval", "StartTime", "StopTime"]:
			self._startSubphrase("time", word, frames.TimeFrame())
			return FILL_FACTOR, True
		elif word=="Time":
			self._startSubphrase("time", word, frames.TimeFrame())
			return TIME_SCALE, True
		return SPACE_IDENTIFIER, False

	def parse_spaceIdentifier(self, word):
		self._finishCurrent()
		if word in ["PositionInterval", "AllSky", "Circle", "Ellipse", "Box",
				"Polygon", "Convex"]:
			self._startSubphrase("space", word)
			return FILL_FACTOR, True
		elif word=="Position":
			self._startSubphrase("space", word)
			return FRAME, True
		return VELOCITY_IDENTIFIER, False

	def parse_velocityIdentifier(self, word):
		self._finishCurrent()
		if word=="VelocityInterval":
			self._warn(1, "Ignoring unsupported VelocityInterval sub-phrase"
				" found in an STC-S description")
			self._startSubphrase("velocity", word)
			return FILL_FACTOR, True
		return SPECTRAL_IDENTIFIER, False

	def parse_spectralIdentifier(self, word):
		self._finishCurrent()
		if word=="SpectralInterval":
			self._startSubphrase("spectral", word, frames.SpecFrame())
			return FILL_FACTOR, True
		elif word=="Spectral":
			self._startSubphrase("spectral", word, frames.SpecFrame())
			return REFPOS, True
		return REDSHIFT_IDENTIFIER, False

	def parse_redshiftIdentifier(self, word):
		self._finishCurrent()
		self.words.done = True
		if word in ["RedshiftInterval", "Redshift"]:
			self._startSubphrase("redshift", word, frames.SpecFrame(
				system="VOPTICAL", unit=units.defaultVelocityUnit,
				domain="REDSHIFT"))
			if word=="RedshiftInterval":
				return FILL_FACTOR, True
			return REFPOS, True
		return self.parse_end(word)

	def parse_end(self, word):
		if word:
			self._fail("Unsupported or irrelevant word '%s' found in STC-S"
				" %s sub-phrase"%(word, self.lastKind))
		return END, True

	############## frame-like items

	def parse_fillFactor(self, word):
		kind = self.current.kind
		nextState = {"time": TIME_SCALE, "space": FRAME, "velocity": LIMITS
			}.get(kind, REFPOS)
		if word!="fillfactor":
			return nextState, False
		val = parseNumber(self._advance())
		if val is None:
			self._fail("Expected numerical filling factor, but found '%s' in"
				" an STC-S description"%self.word)
		self.current.fill = val
		self.current.props["FILLFACTOR"] = self.word
		return nextState, True

	def parse_timeScale(self, word):
		frame = self.current.frame
		if word in timeScaleWords:
			scale, level = timeScaleWords[word]
			if level is not None:
				self._warn(level, "'%s' being used in place of unsupported time"
					" scale '%s' found in STC-S description"%(scale, word))
			frame.timeScale = scale
			self.current.props["TIMESCALE"] = word
			return REFPOS, True

		self._warn(2, "Time scale defaulting to 'TAI' in an STC-S description")
		frame.timeScale = "TAI"
		if word=="nil":
			self.current.props["TIMESCALE"] = word
			return REFPOS, True
		return REFPOS, False

	def parse_frame(self, word):
		sub = self.current
		if word in frameWords:
			sub.system, sub.frameWord = frameWords[word], word
		elif word in unsupportedFrameWords:
			self._warn(1, "'UNKNOWNFrame' being used in place of unsupported"
				" frame '%s' found in an STC-S description"%word)
			sub.system, sub.frameWord = "UNKNOWN", word
		else:
			sub.system = "UNKNOWN"
			return REFPOS, False
		sub.props["FRAME"] = word
		return REFPOS, True

	def parse_refPos(self, word):
		kind = self.current.kind
		if kind=="time":
			return self._parseTimeRefPos(word)
		elif kind=="space":
			return self._parseSpaceRefPos(word)
		else:
			return self._parseSpectralRefPos(word)

	def _parseTopocentric(self, word, label):
		"""handles reference positions for time and space, where only
		TOPOCENTER is supported.

		This returns whether the word was consumed.
		"""
		if word=="TOPOCENTER":
			pass
		elif word=="UNKNOWNRefPos":
			self._warn(1, "'TOPOCENTER' being used in place of %s"
				" 'UNKNOWNRefPos' found in an STC-S description"%label)
		elif word in unsupportedSpaceRefPos:
			self._warn(1, "Unsupported %s reference position '%s' found in"
				" STC-S description. Using 'TOPOCENTER' instead"%(label, word))
		else:
			self._warn(2, "%s reference position defaulting to 'TOPOCENTER'"
				" in an STC-S description"%label.capitalize())
			return False
		self.current.props["REFPOS"] = word
		return True

	def _parseTimeRefPos(self, word):
		consumed = self._parseTopocentric(word, "time")
		self.current.frame.refPos = "TOPOCENTER"
		return {"TimeInterval": START, "StartTime": START, "StopTime": STOP,
			"Time": TIME}[self.current.id], consumed

	def _parseSpaceRefPos(self, word):
		sub = self.current
		if sub.system!="UNKNOWN":
			return FLAVOUR, self._parseTopocentric(word, "space")

		if word=="TOPOCENTER":
			pass
		elif word=="UNKNOWNRefPos" or word in unsupportedSpaceRefPos:
			self._warn(1, "Ignoring space reference position '%s' found in an"
				" STC-S description"%word)
		else:
			return FLAVOUR, False
		sub.props["REFPOS"] = word
		return FLAVOUR, True

	def _parseSpectralRefPos(self, word):
		sub = self.current
		label = sub.kind.capitalize()
		consumed = True
		if word in stdOfRestForRefPos:
			stdOfRest = stdOfRestForRefPos[word]
		elif word=="UNKNOWNRefPos":
			self._warn(1, "'HELIOCENTER' being used in place of %s"
				" 'UNKNOWNRefPos' found in an STC-S description"%sub.kind)
			stdOfRest = "HELIOCENTER"
		elif word in unsupportedSpectralRefPos:
			self._warn(1, "Using 'HELIOCENTER' in place of unsupported %s"
				" reference position '%s' found in an STC-S description"%(
				sub.kind, word))
			stdOfRest = "HELIOCENTER"
		else:
			self._warn(2, "%s reference position defaulting to 'HELIOCENTER'"
				" in an STC-S description"%label)
			stdOfRest, consumed = "HELIOCENTER", False
		sub.frame.stdOfRest = stdOfRest
		if consumed:
			sub.props["REFPOS"] = word

		return {"SpectralInterval": LIMITS, "Spectral": RED_SPEC_VALUE,
			"RedshiftInterval": TYPE_DOPPLER, "Redshift": TYPE_DOPPLER}[
			sub.id], consumed

	def parse_flavour(self, word):
		sub = self.current
		if word in unsupportedFlavours:
			self._fail("Unsupported space 'Flavor' (%s) found in an STC-S"
				" description"%word, STCNotImplementedError)

		consumed = word in flavourAxes
		naxes = flavourAxes.get(word)
		if consumed and naxes is not None and sub.system!="UNKNOWN":
			self._fail("Unsupported combination of space 'Flavor' (%s) and"
				" 'Frame' (%s) found in an STC-S description"%(word, sub.frameWord))

		domain = None
		if sub.frameWord and sub.frameWord!="UNKNOWNFrame":
			domain = sub.frameWord
		if naxes is None:
			sub.frame = frames.SkyFrame(system=sub.system)
			if sub.system=="UNKNOWN" and domain:
				sub.frame.domain = domain
		else:
			sub.frame = frames.BasicFrame(naxes, "m", domain=domain)
		sub.frame.epoch = self.epoch

		if consumed:
			sub.props["FLAVOR"] = word
			sub.props["FLAVOUR"] = word
		return shapeStates[sub.id], consumed

	############## values

	def _readTime(self, label):
		"""reads a JD, MJD or ISO time starting with the current word and
		returns the MJD and the text of the literal.
		"""
		sub, word = self.current, self.word
		if word in ["JD", "MJD"]:
			valWord = self._advance()
			val = parseNumber(valWord)
			if val is None:
				self._fail("Expected numerical %s %s time, but found '%s %s' in"
					" an STC-S description"%(word, label, word, valWord))
			if word=="JD":
				val = times.jdToMJD(val)
			text = "%s %s"%(word, valWord)

		else:
			try:
				if not isISOTime(word):
					raise STCLiteralError("Bad ISO datetime literal: %s"%word, word)
				val = times.dateTimeToMJD(times.parseISODT(word))
			except STCLiteralError:
				self._fail("Expected ISO date string %s time, but found '%s' in"
					" an STC-S description"%(label, word))
			text = word

		if sub.epoch is None:
			sub.epoch = val
		return val, text

	def parse_start(self, word):
		sub = self.current
		sub.start, sub.props["START"] = self._readTime("Start")
		if sub.id=="TimeInterval":
			return STOP, True
		return TIME_LABEL, True

	def parse_stop(self, word):
		sub = self.current
		sub.stop, sub.props["STOP"] = self._readTime("Stop")
		return TIME_LABEL, True

	def parse_timeLabel(self, word):
		if word=="Time":
			return TIME, True
		return UNIT, False

	def parse_time(self, word):
		sub = self.current
		sub.value, sub.props["TIME"] = self._readTime("Time")
		return UNIT, True

	def _readVector(self, count, what):
		"""reads count numbers starting at the current word and returns them
		together with their literals joined by blanks.

		After this, the current word is the word following the numbers.
		"""
		vals, literals = [], []
		for i in range(count):
			val = parseNumber(self.word)
			if val is None:
				self._fail("Expected another axis value for a space %s, but found"
					" '%s' in an STC-S description"%(what, self.word))
			vals.append(val)
			literals.append(self.word)
			self._advance()
		return vals, " ".join(literals)

	def parse_positionInterval(self, word):
		sub = self.current
		sub.lolim, sub.props["LOLIMIT"] = self._readVector(sub.naxes,
			"PositionInterval")
		sub.hilim, sub.props["HILIMIT"] = self._readVector(sub.naxes,
			"PositionInterval")
		return POSITION_LABEL, False

	def parse_allSky(self, word):
		return POSITION_LABEL, False

	def parse_circle(self, word):
		sub = self.current
		sub.centre, sub.props["CENTRE"] = self._readVector(sub.naxes, "Circle")
		(sub.radius,), sub.props["RADIUS"] = self._readVector(1, "Circle")
		return POSITION_LABEL, False

	def parse_ellipse(self, word):
		sub = self.current
		sub.centre, sub.props["CENTRE"] = self._readVector(sub.naxes, "Ellipse")
		(r1,), sub.props["RADIUS1"] = self._readVector(1, "Ellipse")
		(r2,), sub.props["RADIUS2"] = self._readVector(1, "Ellipse")
		sub.radii = (r1, r2)
		(sub.posAngle,), sub.props["POSANGLE"] = self._readVector(1, "Ellipse")
		return POSITION_LABEL, False

	def parse_box(self, word):
		sub = self.current
		sub.centre, sub.props["CENTRE"] = self._readVector(sub.naxes, "Box")
		sub.boxSize, sub.props["BSIZE"] = self._readVector(sub.naxes, "Box")
		return POSITION_LABEL, False

	def parse_polygon(self, word):
		sub = self.current
		vertices, literals = [], []
		while parseNumber(self.word) is not None:
			vertex = []
			for i in range(sub.naxes):
				val = parseNumber(self.word)
				if val is None:
					self._fail("Expected another vertex value for a Polygon, but"
						" found '%s' in an STC-S description"%self.word)
				vertex.append(val)
				literals.append(self.word)
				self._advance()
			vertices.append(vertex)
		sub.vertices = vertices
		sub.props["VERTICES"] = " ".join(literals)
		return POSITION_LABEL, False

	def parse_convex(self, word):
		self._fail("A Convex was found within an STC-S description ('Convex'"
			" regions are not yet supported)", STCNotImplementedError)

	def parse_position(self, word):
		sub = self.current
		sub.value, sub.props["POSITION"] = self._readVector(sub.naxes,
			"Position")
		return UNIT, False

	def parse_positionLabel(self, word):
		if word=="Position":
			return POSITION, True
		return UNIT, False

	def parse_limits(self, word):
		sub = self.current
		nextState = RED_SPEC_LABEL
		if sub.kind=="velocity":
			nextState = VELOCITY_VALUE

		sub.lolim = parseNumber(word)
		if sub.lolim is None:
			self._fail("Expected a numerical value for a %s lolimit, but found"
				" '%s' in an STC-S description"%(sub.kind, word))
		sub.props["LOLIMIT"] = word
		sub.hilim = parseNumber(self._advance())
		if sub.hilim is None:
			self._fail("Expected a numerical value for a %s hilimit, but found"
				" '%s' in an STC-S description"%(sub.kind, self.word))
		sub.props["HILIMIT"] = self.word
		return nextState, True

	def parse_redSpecLabel(self, word):
		if word==self.current.kind.capitalize():
			return RED_SPEC_VALUE, True
		return UNIT, False

	def parse_redSpecValue(self, word):
		sub = self.current
		sub.value = parseNumber(word)
		if sub.value is None:
			self._fail("Expected a numerical %s value, but found '%s' in an"
				" STC-S description"%(sub.kind, word))
		sub.props[sub.kind.upper()] = word
		return UNIT, True

	def parse_typeDoppler(self, word):
		sub = self.current
		frame = sub.frame
		sub.isVelocity = word!="REDSHIFT"
		if word in ["VELOCITY", "REDSHIFT"]:
			sub.props["TYPE"] = word
			word = self._advance()

		consumed = True
		if word=="OPTICAL":
			frame.system = sub.isVelocity and "VOPTICAL" or "REDSHIFT"
		elif word=="RADIO" and sub.isVelocity:
			frame.system = "VRADIO"
		elif word=="RELATIVISTIC" and sub.isVelocity:
			frame.system = "VREL"
		elif word in ["RADIO", "RELATIVISTIC"]:
			self._warn(1, "STC-S %s redshift not supported. Assuming OPTICAL"
				" redshift instead"%word)
			frame.system = "REDSHIFT"
		else:
			frame.system = sub.isVelocity and "VOPTICAL" or "REDSHIFT"
			consumed = False
		if not sub.isVelocity:
			frame.setUnit(0, "")
		if consumed:
			sub.props["DOPPLERDEF"] = word

		if sub.id=="RedshiftInterval":
			return LIMITS, consumed
		return RED_SPEC_VALUE, consumed

	def parse_velocityValue(self, word):
		if word!="Velocity":
			return UNIT, False
		if parseNumber(self._advance()) is None:
			self._fail("Expected a numerical value but found '%s' after"
				" 'Velocity' in an STC-S description"%self.word)
		return UNIT, True

	############## trailing items

	def parse_unit(self, word):
		sub = self.current
		unit, consumed = None, False
		if word=="unit":
			unit, consumed = self._advance(), True
			sub.props["UNIT"] = unit
		sub.unit = unit

		try:
			getattr(self, "_setUnit_"+sub.kind)(sub, unit)
		except STCUnitError:
			self._fail("Unsupported units (%s) for the %s axis within an STC-S"
				" description"%(unit, sub.kind))
		return ERROR, consumed

	def _setUnit_time(self, sub, unit):
		sub.scale = units.getTimeScale(unit)

	def _setUnit_space(self, sub, unit):
		if sub.isSky:
			sub.scale = units.getSkyScale(unit)
		else:
			sub.scale = 1.
			for axis in range(sub.naxes):
				sub.frame.setUnit(axis, unit or "m")
			sub.frame.activeUnit = True

	def _setUnit_velocity(self, sub, unit):
		pass

	def _setUnit_spectral(self, sub, unit):
		unit = unit or "Hz"
		sub.frame.system = units.getSpectralSystem(unit)
		sub.frame.setUnit(0, unit)
		sub.scale = 1.

	def _setUnit_redshift(self, sub, unit):
		sub.scale = 1.
		if sub.isVelocity:
			unit = unit or units.defaultVelocityUnit
			units.splitVelocityUnit(unit)
			sub.frame.setUnit(0, unit)
		elif unit is None or unit=="nil":
			sub.frame.setUnit(0, "")
		else:
			sub.frame.setUnit(0, unit)

	def _readNumbers(self):
		"""reads numbers following the current word and returns their
		literals.

		After this, the current word is the first non-number.
		"""
		literals = []
		while parseNumber(self._advance()) is not None:
			literals.append(self.word)
		return literals

	def parse_error(self, word):
		sub = self.current
		if word!="Error":
			return RESOLUTION, False

		literals = self._readNumbers()
		if not literals:
			self._fail("No numerical values found after 'Error' in an STC-S"
				" description")
		nerror = sub.naxes
		if len(literals)>nerror:
			self._warn(1, "Ignoring extra 'Error' parameters found in an STC-S"
				" %s sub-phrase"%sub.kind)
			literals = literals[:nerror]
		errors = [parseNumber(l) for l in literals]
		sub.errors = errors+[errors[-1]]*(nerror-len(errors))
		sub.props["ERROR"] = " ".join(literals)
		return RESOLUTION, False

	def _parseIgnored(self, word, keyword, propKey):
		"""reads the values following keyword into the property propKey.

		This returns whether keyword was found.
		"""
		if word!=keyword:
			return False
		literals = self._readNumbers()
		self._warn(1, "Ignoring '%s' values found in an STC-S %s sub-phrase"%(
			keyword, self.current.kind))
		if literals:
			self.current.props[propKey] = " ".join(literals)
		return True

	def parse_resolution(self, word):
		self._parseIgnored(word, "Resolution", "RESOLUTION")
		if self.current.kind=="space":
			return SIZE, False
		return PIX_SIZE, False

	def parse_size(self, word):
		self._parseIgnored(word, "Size", "SIZE")
		return PIX_SIZE, False

	def parse_pixSize(self, word):
		self._parseIgnored(word, "PixSize", "PIXSIZE")
		return nextIdentifier[self.current.kind], False


def parseSubphrases(wordCtx, warn):
	"""returns a dict of SubPhrases for the STC-S description in wordCtx.
	"""
	return STCSParser(wordCtx, warn).parse()


def _test():
	import doctest
	from stcscodec import stcsparse
	doctest.testmod(stcsparse)

if __name__=="__main__":
	_test()
