"""
Definitions and shared code for STC-S processing.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


class STCError(Exception):
	"""is the base class for all exceptions escaping the STC-S codec.

	Apart from the normal message, you can give a "hint" constructor argument.
	"""
	def __init__(self, msg="", hint=None):
		Exception.__init__(self, msg)
		self.msg = msg
		self.hint = hint


class STCSParseError(STCError):
	"""is raised if an STC-S expression could not be parsed.

	The offending expression (the context snippet of the last few words)
	is in the expr attribute, the word that triggered the error in pos.
	"""
	def __init__(self, msg, expr=None, pos=None, hint=None):
		STCError.__init__(self, msg, hint=hint)
		self.pos, self.expr = pos, expr


class STCLiteralError(STCError):
	"""is raised when a literal is not well-formed.

	There is an attribute literal giving the malformed literal.
	"""
	def __init__(self, msg, literal=None):
		STCError.__init__(self, msg)
		self.literal = literal


class STCInternalError(STCError):
	"""is raised when assumptions about the library behaviour are violated.
	"""


class STCValueError(STCError):
	"""is raised when some STC specification is inconsistent.
	"""


class STCUnitError(STCError):
	"""is raised when some impossible operation on units is requested.
	"""


class STCNotImplementedError(STCError):
	"""is raised when the current implementation limits are reached.
	"""


class STCSWriteError(STCError):
	"""is raised by getSTCS when a region cannot be written as STC-S.

	The warnings that led to the rejection are in the warnings attribute.
	"""
	def __init__(self, msg, warnings=()):
		STCError.__init__(self, msg)
		self.warnings = list(warnings)


class STCSSelectionError(STCValueError):
	"""is raised when a read is requested to return nothing at all.
	"""


class STCSWarning(object):
	"""a non-fatal problem found while reading or writing STC-S.

	level is 1 if an explicitly given value was replaced because it is
	not supported, 2 if a value was missing and a default was assumed,
	3 for mere notes on harmless substitutions.
	"""
	def __init__(self, level, message):
		self.level, self.message = level, message

	def __str__(self):
		return self.message

	def __repr__(self):
		return "STCSWarning(%d, %r)"%(self.level, self.message)

	def __eq__(self, other):
		return (isinstance(other, STCSWarning)
			and self.level==other.level
			and self.message==other.message)

	def __hash__(self):
		return hash((self.level, self.message))


class CachedGetter(object):
	def __init__(self, getter):
		self.cache, self.getter = None, getter

	def __call__(self):
		if self.cache is None:
			self.cache = self.getter()
		return self.cache


#### Constants

mjdOffset = 2400000.5

# Names of the sub-phrase maps in property trees, in emission order
subphraseKeys = ["TIME_PROPS", "SPACE_PROPS", "SPECTRAL_PROPS",
	"REDSHIFT_PROPS"]

planets = ["MERCURY", "VENUS", "MARS", "JUPITER", "SATURN", "URANUS",
	"NEPTUNE", "PLUTO"]

# reference positions that are known to STC-S but not supported for time
# and space
unsupportedSpaceRefPos = ["HELIOCENTER", "BARYCENTER", "GEOCENTER",
	"GALACTIC_CENTER", "EMBARYCENTER", "MOON"]+planets

# reference positions mapping to spectral standards of rest
stdOfRestForRefPos = {
	"GEOCENTER": "GEOCENTER",
	"BARYCENTER": "BARYCENTER",
	"HELIOCENTER": "HELIOCENTER",
	"TOPOCENTER": "TOPOCENTER",
	"LSR": "LSRK",
	"LSRK": "LSRK",
	"LSRD": "LSRD",
	"GALACTIC_CENTER": "GALACTIC_CENTER",
}

unsupportedSpectralRefPos = ["LOCAL_GROUP_CENTER", "EMBARYCENTER",
	"MOON"]+planets

# STC-S time scale words mapped to (scale, warning level).  Level None
# means no warning.
timeScaleWords = {
	"TT": ("TT", None),
	"TAI": ("TAI", None),
	"UTC": ("UTC", None),
	"TDB": ("TDB", None),
	"TCG": ("TCG", None),
	"TCB": ("TCB", None),
	"LST": ("LMST", None),
	"TDT": ("TT", 3),
	"ET": ("TT", 3),
	"IAT": ("TAI", 3),
	"TEB": ("TDB", 1),
}

# time scales writable as STC-S, mapped to their STC-S names
writableTimeScales = {
	"TT": "TT",
	"TAI": "TAI",
	"UTC": "UTC",
	"TDB": "TDB",
	"TCG": "TCG",
	"TCB": "TCB",
	"LMST": "LST",
}

# STC-S frame words mapped to sky systems
frameWords = {
	"ICRS": "ICRS",
	"FK5": "FK5",
	"FK4": "FK4",
	"J2000": "FK5",
	"B1950": "FK4",
	"ECLIPTIC": "ECLIPTIC",
	"GALACTIC": "GALACTIC",
	"GALACTIC_II": "GALACTIC",
	"SUPER_GALACTIC": "SUPERGALACTIC",
	"UNKNOWNFrame": "UNKNOWN",
}

# frames that STC-S knows but that we cannot represent as sky frames
unsupportedFrameWords = ["GEO_C", "GEO_D"]

# all frame names legal in STC-S
legalFrameNames = ["ICRS", "FK5", "FK4", "J2000", "B1950", "ECLIPTIC",
	"GALACTIC", "GALACTIC_I", "GALACTIC_II", "SUPER_GALACTIC", "GEO_C",
	"GEO_D", "UNKNOWNFrame"]

# sky systems writable as STC-S: system -> (frame name, required equinox)
writableSkySystems = {
	"FK4": ("B1950", 1950.0),
	"FK5": ("J2000", 2000.0),
	"ICRS": ("ICRS", None),
	"ECLIPTIC": ("ECLIPTIC", 2000.0),
	"GALACTIC": ("GALACTIC", None),
	"SUPERGALACTIC": ("SUPER_GALACTIC", None),
	"UNKNOWN": (None, None),
}

# flavour words and the number of axes they imply; None means sky
flavourAxes = {
	"SPHER2": None,
	"CART1": 1,
	"CART2": 2,
	"CART3": 3,
}

unsupportedFlavours = ["UNITSPHERE", "SPHER3"]

# units STC-S allows on spatial axes
writableSpaceUnits = ["deg", "arcmin", "arcsec", "m", "mm", "km", "AU",
	"pc", "kpc", "Mpc"]
