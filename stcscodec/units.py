"""
Definition and conversion of units in STC-S

For every physical quantity, there is a standard unit defined:

* angles: deg on input, rad internally
* distances: m
* time: s on input, d internally
* frequencies: Hz

We keep dictionaries of conversion factors to those units (i.e., multiply
them to values to end up in the standard units).  The converters work
accordingly: getXConv(fromU, toU) returns a function converting a number
from fromU to toU.

The main interface are functions returning converter functions.  Pass
a value in fromUnit to them and receive a value in toUnit.  Simple factors
unfortunately don't cut it here since conversion from wavelength to
frequency needs division of the value.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import math

from stcscodec.common import *


toRad = math.pi/180.
oneAU = 1.49597870691e11   # IAU
onePc = oneAU/2/math.tan(0.5/3600*toRad)
lightspeed = 2.99792458e8  # SI
planckConstant = 4.13566733e-15  # CODATA 2008, in eV s
julianYear = 365.25*24*3600


def makeConverterMaker(label, conversions):
	"""returns a conversion function that converts between any of the units
	mentioned in the dict conversions.
	"""
	def getConverter(fromUnit, toUnit):
		if fromUnit not in conversions or toUnit not in conversions:
			raise STCUnitError("One of '%s' or '%s' is no valid %s unit"%(
				fromUnit, toUnit, label))
		fact = conversions[toUnit]/conversions[fromUnit]
		def convert(val):
			return fact*val
		return convert
	return getConverter

distFactors = {
	"m": 1.,
	"km": 1e-3,
	"mm": 1e3,
	"AU": 1/oneAU,
	"pc": 1/onePc,
	"kpc": 1/(1e3*onePc),
	"Mpc": 1/(1e6*onePc),
	"lyr": 1/(lightspeed*julianYear),
}
getDistConv = makeConverterMaker("distance", distFactors)


angleFactors = {
	"deg": 1.,
	"rad": toRad,
	"arcmin": 60.,
	"arcsec": 3600.,
}
getAngleConv = makeConverterMaker("angle", angleFactors)


timeFactors = {
	"s": 1.,
	"h": 1/3600.,
	"d": 1/(3600.*24),
	"a": 1/julianYear,
	"yr": 1/julianYear,
	"cy": 1/(julianYear*100),
}
getTimeConv = makeConverterMaker("time", timeFactors)


# spectral units have the additional intricacy that a factor is not
# enough when wavelength needs to be converted to a frequency.
freqFactors = {
	"Hz": 1.,
	"kHz": 1e-3,
	"MHz": 1e-6,
	"GHz": 1e-9,
	"eV": planckConstant,
	"keV": planckConstant/1e3,
	"MeV": planckConstant/1e6,
}
getFreqConv = makeConverterMaker("frequency", freqFactors)

wlFactors = {
	"m": 1.0,
	"mm": 1e3,
	"um": 1e6,
	"nm": 1e9,
	"Angstrom": 1e10,
	"A": 1e10,
}
getWlConv = makeConverterMaker("wavelength", wlFactors)

def getSpectralConv(fromUnit, toUnit):
	if fromUnit in wlFactors:
		if toUnit in wlFactors:
			conv = getWlConv(fromUnit, toUnit)
		else: # toUnit is freq
			fromFunc = getWlConv(fromUnit, "m")
			toFunc = getFreqConv("Hz", toUnit)
			def conv(val):
				return toFunc(lightspeed/fromFunc(val))
	else:  # fromUnit is freq
		if toUnit in freqFactors:
			conv = getFreqConv(fromUnit, toUnit)
		else:  # toUnit is wl
			fromFunc = getFreqConv(fromUnit, "Hz")
			toFunc = getWlConv("m", toUnit)
			def conv(val):
				return toFunc(lightspeed/fromFunc(val))
	return conv


distUnits = set(distFactors)
angleUnits = set(angleFactors)
timeUnits = set(timeFactors)
spectralUnits = set(wlFactors) | set(freqFactors)

systems = [(distUnits, getDistConv), (angleUnits, getAngleConv),
	(timeUnits, getTimeConv), (spectralUnits, getSpectralConv)]


def memoized(origFun):
	cache = {}
	def fun(*args):
		if args not in cache:
			cache[args] = origFun(*args)
		return cache[args]
	return fun


@memoized
def getScalarConverter(fromUnit, toUnit):
	"""returns a function converting fromUnit values to toUnitValues.
	"""
	for units, factory in systems:
		if fromUnit in units and toUnit in units:
			return factory(fromUnit, toUnit)
	raise STCUnitError("No known conversion from '%s' to '%s'"%(
		fromUnit, toUnit))


def splitVelocityUnit(unit):
	"""returns a (spaceUnit, timeUnit) pair for a velocity unit like km/s.
	"""
	try:
		spaceUnit, timeUnit = unit.split("/")
	except ValueError:
		raise STCUnitError("'%s' is not a velocity unit"%unit)
	return spaceUnit, timeUnit


@memoized
def getVelocityConverter(fromUnit, toUnit):
	"""returns a function converting velocities in fromUnit to toUnit.

	Both units have the form space/time, e.g., km/s.
	"""
	fromSpace, fromTime = splitVelocityUnit(fromUnit)
	toSpace, toTime = splitVelocityUnit(toUnit)
	spaceFun = getScalarConverter(fromSpace, toSpace)
# Attention: We swap from and to here.  This only works because inversion
# and division are the same thing for the purely multiplicative time units.
	timeFun = getScalarConverter(toTime, fromTime)
	def convert(val):
		return spaceFun(timeFun(val))
	return convert


############ STC-S unit tables

# STC-S time units and their lengths in days
stcsTimeUnits = ["s", "d", "a", "yr", "cy"]

def getTimeScale(unit):
	"""returns the factor turning values in the STC-S time unit unit into
	days.

	None means seconds, the STC-S default.
	"""
	if unit is None:
		unit = "s"
	if unit not in stcsTimeUnits:
		raise STCUnitError("Unsupported time unit '%s'"%unit)
	return getTimeConv(unit, "d")(1.)


stcsSkyUnits = ["deg", "arcmin", "arcsec"]

def getSkyScale(unit):
	"""returns the factor turning values in the STC-S angle unit unit into
	radians.

	None means degrees, the STC-S default.
	"""
	if unit is None:
		unit = "deg"
	if unit not in stcsSkyUnits:
		raise STCUnitError("Unsupported spatial unit '%s'"%unit)
	return getAngleConv(unit, "rad")(1.)


# STC-S spectral units and the spectral systems they imply
spectralSystemForUnit = {
	"Hz": "FREQ",
	"MHz": "FREQ",
	"GHz": "FREQ",
	"m": "WAVELEN",
	"mm": "WAVELEN",
	"um": "WAVELEN",
	"nm": "WAVELEN",
	"A": "WAVELEN",
	"Angstrom": "WAVELEN",
	"eV": "ENERGY",
	"keV": "ENERGY",
	"MeV": "ENERGY",
}

# fallback units when writing spectral systems with units STC-S doesn't
# know
defaultSpectralUnits = {
	"FREQ": "Hz",
	"WAVELEN": "m",
	"ENERGY": "eV",
}


def getSpectralSystem(unit):
	"""returns the spectral system (FREQ, WAVELEN, ENERGY) implied by the
	STC-S spectral unit unit.
	"""
	try:
		return spectralSystemForUnit[unit]
	except KeyError:
		raise STCUnitError("Unsupported spectral unit '%s'"%unit)


############ Redshift systems
# All conversions go through the optical redshift z.

redshiftSystems = ["REDSHIFT", "VOPTICAL", "VRADIO", "VREL"]
defaultVelocityUnit = "km/s"
_cKms = lightspeed/1e3


def _toZ(system, val):
	if system=="REDSHIFT":
		return val
	beta = val/_cKms
	if system=="VOPTICAL":
		return beta
	elif system=="VRADIO":
		return 1/(1-beta)-1
	elif system=="VREL":
		return math.sqrt((1+beta)/(1-beta))-1
	raise STCValueError("Unknown redshift system '%s'"%system)


def _fromZ(system, z):
	if system=="REDSHIFT":
		return z
	elif system=="VOPTICAL":
		beta = z
	elif system=="VRADIO":
		beta = 1-1/(1+z)
	elif system=="VREL":
		beta = ((1+z)**2-1)/((1+z)**2+1)
	else:
		raise STCValueError("Unknown redshift system '%s'"%system)
	return beta*_cKms


def getRedshiftConv(fromSystem, fromUnit, toSystem, toUnit):
	"""returns a function converting redshift values between systems
	and units.

	Velocity systems take units like km/s; the REDSHIFT system is
	dimensionless and ignores its unit.
	"""
	if fromSystem==toSystem:
		if fromSystem=="REDSHIFT" or fromUnit==toUnit:
			return lambda val: val
		return getVelocityConverter(fromUnit, toUnit)

	toKms, fromKms = lambda val: val, lambda val: val
	if fromSystem!="REDSHIFT":
		toKms = getVelocityConverter(fromUnit, defaultVelocityUnit)
	if toSystem!="REDSHIFT":
		fromKms = getVelocityConverter(defaultVelocityUnit, toUnit)
	def convert(val):
		return fromKms(_fromZ(toSystem, _toZ(fromSystem, toKms(val))))
	return convert
