"""
Converting regions to STC-S.

The strategy here is to first fill a property tree from the regions (the
area and the coords), re-using whatever the tree already contains for
things regions do not describe (Resolution, PixSize, reference positions)
or to find out how numbers were formatted, and then flatten out the
whole thing, one line per sub-phrase.

Regions that cannot be written are rejected with an STCSWriteError
carrying the warnings collected up to that point.  Nothing is
written in that case.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import math
import re

from stcscodec import frames
from stcscodec import props
from stcscodec import regions
from stcscodec import sphermath
from stcscodec import times
from stcscodec import units
from stcscodec.common import *


writableStdOfRests = set(stdOfRestForRefPos.values())

writableSpectralUnits = {
	"FREQ": ["Hz", "MHz", "GHz"],
	"WAVELEN": ["m", "mm", "um", "nm", "Angstrom", "A"],
	"ENERGY": ["eV", "keV", "MeV"],
}

redshiftSystemForType = {
	("VELOCITY", "OPTICAL"): "VOPTICAL",
	("VELOCITY", "RADIO"): "VRADIO",
	("VELOCITY", "RELATIVISTIC"): "VREL",
	("REDSHIFT", "OPTICAL"): "REDSHIFT",
}
typeForRedshiftSystem = dict((v, k) for k, v in redshiftSystemForType.items())


class WriteContext(object):
	"""is the state of one write operation.

	It holds the options, the warnings collected so far, and the IDs
	the sub-phrases had in the property tree passed in.
	"""
	def __init__(self, full=False, defDigits=None, warnings=None):
		self.full, self.defDigits = full, defDigits
		if warnings is None:
			warnings = []
		self.warnings = warnings
		self.origIds = {}

	def warn(self, msg):
		self.warnings.append(STCSWarning(1, msg))

	def reject(self, msg):
		self.warn(msg)
		raise STCSWriteError(msg, self.warnings)

	def getDigits(self, frame):
		if self.defDigits is not None:
			return self.defDigits
		return frame.digits


def _isFinite(val):
	return not (math.isinf(val) or math.isnan(val))


############## Axis classification

def classifyAxes(frame, warn):
	"""returns a dict mapping time, space, spectral and redshift to the
	lists of the axes of frame belonging to them, plus a flag whether the
	space axes are sky axes.

	Axes that do not fit are reported through warn and left out.
	"""
	groups = {"time": [], "space": [], "spectral": [], "redshift": []}
	isSky = False
	for axis in range(frame.naxes):
		pFrame, _ = frame.getPrimaryFrame(axis)
		kind = pFrame.kind

		if kind=="time" or kind=="spectral" or kind=="redshift":
			if groups[kind]:
				warn("More than one %s axis found. Extra axis (axis %d) will be"
					" ignored."%(kind, axis+1))
			else:
				groups[kind].append(axis)

		elif kind=="sky":
			if groups["space"] and not isSky:
				warn("Mixture of basic and sky frame axes found. Sky frame axis %d"
					" will be ignored."%(axis+1))
			elif len(groups["space"])>=2:
				warn("More than two sky frame axes found. Extra axis (axis %d)"
					" will be ignored."%(axis+1))
			else:
				groups["space"].append(axis)
				isSky = True

		elif kind=="basic":
			if isSky:
				warn("Mixture of basic and sky frame axes found. Basic frame axis"
					" %d will be ignored."%(axis+1))
			elif len(groups["space"])>=3:
				warn("More than three basic space frame axes found. Extra axis"
					" (axis %d) will be ignored."%(axis+1))
			else:
				groups["space"].append(axis)

		else:
			warn("Could not classify axis %d (%r). It will be ignored."%(
				axis+1, pFrame))
	return groups, isSky


def _getSubphraseProps(tree, kind):
	key = kind.upper()+"_PROPS"
	if key not in tree:
		tree[key] = {}
	return tree[key]


def _retainUnits(spProps):
	return ("RESOLUTION" in spProps or "PIXSIZE" in spProps
		or "SIZE" in spProps)


def _formatVector(spProps, key, vals, digits):
	return " ".join(props.getFmt(spProps, key, i, digits)%v
		for i, v in enumerate(vals))


############## Time

def _formatTime(spProps, key, mjd):
	"""returns a time literal for mjd in the style of the literal in
	spProps[key].

	Without a previous literal, an ISO literal with one decimal is
	returned.
	"""
	old = spProps.get(key)
	if not old:
		return times.formatISO(mjd, 1)
	mat = re.search(r"\.(\d*)", old)
	ndp = 0
	if mat:
		ndp = len(mat.group(1))
	if old.startswith("JD"):
		return "JD %.*f"%(ndp, times.mjdToJD(mjd))
	elif old.startswith("MJD"):
		return "MJD %.*f"%(ndp, mjd)
	return times.formatISO(mjd, ndp)


def _writeTime(ctx, reg, spProps):
	frame = reg.frame
	if not isinstance(frame, frames.TimeFrame):
		ctx.reject("The time sub-phrase is not described using a time frame.")

	lbnd, ubnd = [v[0] for v in reg.getBounds()]
	fill = reg.fillFactor or 1.0
	if lbnd==ubnd:
		spProps["ID"] = "Time"
		spProps["TIME"] = _formatTime(spProps, "TIME", frame.toMJD(lbnd))
		fill = None
	elif _isFinite(lbnd) and _isFinite(ubnd):
		spProps["ID"] = "TimeInterval"
		spProps["START"] = _formatTime(spProps, "START", frame.toMJD(lbnd))
		spProps["STOP"] = _formatTime(spProps, "STOP", frame.toMJD(ubnd))
	elif _isFinite(lbnd):
		spProps["ID"] = "StartTime"
		spProps["START"] = _formatTime(spProps, "START", frame.toMJD(lbnd))
	elif _isFinite(ubnd):
		spProps["ID"] = "StopTime"
		spProps["STOP"] = _formatTime(spProps, "STOP", frame.toMJD(ubnd))
	else:
		ctx.reject("Cannot write out a time interval unbounded on both sides.")

	props.putFloat(spProps, "FILLFACTOR", fill, 1.0, ctx.full)
	if frame.timeScale not in writableTimeScales:
		ctx.reject("Timescale '%s' is unsupported by STC-S."%frame.timeScale)
	props.putString(spProps, "TIMESCALE",
		writableTimeScales[frame.timeScale], "nil", ctx.full)
	if "REFPOS" not in spProps:
		spProps["REFPOS"] = "TOPOCENTER"

	if reg.uncertainty is not None:
		unit = spProps.get("UNIT") or "s"
		try:
			scale = units.getTimeScale(unit)
		except STCUnitError:
			ctx.reject("Illegal STC-S time unit '%s' found in property tree."%unit)
		lo, hi = [v[0] for v in reg.uncertainty.getBounds()]
		if _isFinite(lo) and _isFinite(hi):
			spProps["ERROR"] = props.getFmt(spProps, "ERROR", 0, 15)%(
				0.5*(hi-lo)/scale)


############## Space

def _getSpaceConverter(ctx, frame, isSky, naxes, spProps):
	"""returns the unit to write spatial values in and a function
	converting frame values to that unit.

	For basic frames, this also stores the unit in spProps.
	"""
	if isSky:
		unit = spProps.get("UNIT")
		if unit not in units.stcsSkyUnits:
			unit = "deg"
		scale = units.getSkyScale(unit)
		return unit, lambda val: val/scale

	frameUnit = frame.getUnit(0)
	for axis in range(1, naxes):
		if frame.getUnit(axis)!=frameUnit:
			ctx.reject("Spatial axis 1 has units '%s' but spatial axis %d has"
				" units '%s' - units must be the same on all axes."%(
				frameUnit, axis+1, frame.getUnit(axis)))

	if _retainUnits(spProps) and spProps.get("UNIT"):
		unit = spProps["UNIT"]
		if unit!=frameUnit:
			try:
				return unit, units.getScalarConverter(frameUnit, unit)
			except STCUnitError:
				ctx.reject("Cannot convert spatial units '%s' to '%s'."%(
					frameUnit, unit))
	else:
		unit = frameUnit
		spProps["UNIT"] = unit
		if unit not in writableSpaceUnits:
			ctx.reject("Cannot use spatial units '%s'."%unit)
	return unit, lambda val: val


def _getFrameName(ctx, frame, isSky, spProps):
	"""returns the STC-S frame name for frame.
	"""
	name = None
	if isSky:
		if frame.system not in writableSkySystems:
			ctx.reject("Sky system '%s' is unsupported by STC-S."%frame.system)
		name, equinox = writableSkySystems[frame.system]
		if name and equinox is not None and frame.equinox!=equinox:
			ctx.reject("STC-S requires an equinox of %g for the %s frame, but"
				" the supplied equinox is %s."%(equinox, name, frame.equinox))
		if name and frameWords.get(spProps.get("FRAME"))==frame.system:
			name = spProps["FRAME"]

	if not name and frame.domain not in (None, "SKY"):
		if frame.domain in legalFrameNames:
			name = frame.domain
		else:
			ctx.warn("'UNKNOWNFrame' being used in place of unsupported frame"
				" '%s'."%frame.domain)
	return name or "UNKNOWNFrame"


def _writeSpaceShape(ctx, reg, spProps, conv, digits):
	"""fills the shape-dependent keys of spProps and returns the fill
	factor to write.
	"""
	fill = reg.fillFactor or 1.0

	def vector(key, vals):
		return _formatVector(spProps, key, [conv(v) for v in vals], digits)

	def scalar(key, val):
		return props.getFmt(spProps, key, 0, digits)%val

	if isinstance(reg, regions.NullRegion) and reg.negated:
		spProps["ID"] = "AllSky"

	elif isinstance(reg, regions.Circle):
		spProps["ID"] = "Circle"
		spProps["CENTRE"] = vector("CENTRE", reg.centre)
		spProps["RADIUS"] = scalar("RADIUS", conv(reg.radius))

	elif isinstance(reg, regions.Box) and ctx.origIds.get("space")=="Box":
		spProps["ID"] = "Box"
		spProps["CENTRE"] = vector("CENTRE", reg.centre)
		spProps["BSIZE"] = vector("BSIZE", [2*h for h in reg.getHalfWidths()])

	elif isinstance(reg, (regions.Interval, regions.Box)):
		spProps["ID"] = "PositionInterval"
		lbnd, ubnd = reg.getBounds()
		for axis, (lo, hi) in enumerate(zip(lbnd, ubnd)):
			if not _isFinite(lo):
				ctx.reject("Spatial axis %d has an undefined lower limit."%(axis+1))
			if not _isFinite(hi):
				ctx.reject("Spatial axis %d has an undefined upper limit."%(axis+1))
		spProps["LOLIMIT"] = vector("LOLIMIT", lbnd)
		spProps["HILIMIT"] = vector("HILIMIT", ubnd)

	elif isinstance(reg, regions.Ellipse):
		spProps["ID"] = "Ellipse"
		spProps["CENTRE"] = vector("CENTRE", reg.centre)
		spProps["RADIUS1"] = scalar("RADIUS1", conv(reg.radii[0]))
		spProps["RADIUS2"] = scalar("RADIUS2", conv(reg.radii[1]))
		angle = reg.angle/units.toRad
		if not isinstance(reg.frame, frames.SkyFrame):
			angle = 90-angle
		spProps["POSANGLE"] = scalar("POSANGLE", angle%360.)

	elif isinstance(reg, regions.Polygon) and reg.boxCentre is not None:
		spProps["ID"] = "Box"
		spProps["CENTRE"] = vector("CENTRE", reg.boxCentre)
		spProps["BSIZE"] = vector("BSIZE", reg.boxSize)

	elif isinstance(reg, regions.Polygon):
		spProps["ID"] = "Polygon"
		fmt = props.getFmt(spProps, "VERTICES", 0, digits)
		spProps["VERTICES"] = " ".join(fmt%conv(v)
			for vertex in reg.vertices for v in vertex)

	elif isinstance(reg, regions.PointList):
		if len(reg.points)>1:
			ctx.reject("The supplied PointList contains more than one position.")
		spProps["ID"] = "Position"
		spProps["POSITION"] = vector("POSITION", reg.points[0])
		fill = None

	else:
		ctx.reject("The supplied %s cannot be written out since STC-S does not"
			" support %s regions."%(reg.regionType, reg.regionType))
	return fill


def _writeSpaceError(ctx, reg, isSky, spProps, conv, digits):
	unc = reg.uncertainty
	if unc is None:
		return
	lbnd, ubnd = unc.getBounds()
	if not all(_isFinite(v) for v in lbnd+ubnd):
		return
	if isSky:
		if isinstance(unc, regions.Box):
			centre = unc.centre
		else:
			centre = unc.getCentre()
		errors = [
			sphermath.getEastwardDist(centre[1],
				abs(reg.frame.axDistance(0, centre[0], ubnd[0]))),
			abs(ubnd[1]-centre[1])]
	else:
		errors = [0.5*(hi-lo) for lo, hi in zip(lbnd, ubnd)]
	spProps["ERROR"] = _formatVector(spProps, "ERROR",
		[conv(e) for e in errors], digits)


def _writeSpace(ctx, reg, spProps, isSky):
	frame = reg.frame
	unit, conv = _getSpaceConverter(ctx, frame, isSky, reg.naxes, spProps)
	digits = ctx.getDigits(frame)

	fill = _writeSpaceShape(ctx, reg, spProps, conv, digits)
	props.putFloat(spProps, "FILLFACTOR", fill, 1.0, ctx.full)
	props.putString(spProps, "FRAME",
		_getFrameName(ctx, frame, isSky, spProps), "UNKNOWNFrame", ctx.full)
	if "REFPOS" not in spProps:
		spProps["REFPOS"] = "TOPOCENTER"

	if isSky:
		flavour = "SPHER2"
	else:
		flavour = "CART%d"%reg.naxes
	spProps.pop("FLAVOR", None)
	props.putString(spProps, "FLAVOUR", flavour, "SPHER2", ctx.full)
	_writeSpaceError(ctx, reg, isSky, spProps, conv, digits)


############## Spectral and redshift

def _writeStdOfRest(ctx, frame, spProps):
	stdOfRest = frame.stdOfRest
	if stdOfRest not in writableStdOfRests:
		stdOfRest = "UNKNOWNRefPos"
	props.putString(spProps, "REFPOS", stdOfRest, "UNKNOWNRefPos", ctx.full)


def _writeOneDim(ctx, reg, spProps, conv, kind, storedFormats):
	"""fills ID, values and error for a spectral or redshift region.

	conv converts frame values to the values written.  The literals
	already in spProps only give the formats if storedFormats is true,
	i.e., if the values are written in the unit they were read in.
	"""
	label = kind.capitalize()
	lo, hi = [conv(v[0]) for v in reg.getBounds()]
	lo, hi = min(lo, hi), max(lo, hi)
	fill = reg.fillFactor or 1.0
	if storedFormats:
		fmtSource = spProps
	else:
		fmtSource = None

	if lo==hi:
		spProps["ID"] = label
		spProps[kind.upper()] = props.getFmt(fmtSource, kind.upper(), 0, 15)%lo
		fill = None
	elif _isFinite(lo) and _isFinite(hi):
		spProps["ID"] = label+"Interval"
		spProps["LOLIMIT"] = props.getFmt(fmtSource, "LOLIMIT", 0, 15)%lo
		spProps["HILIMIT"] = props.getFmt(fmtSource, "HILIMIT", 0, 15)%hi
	else:
		ctx.reject("Cannot write out an unbounded %s interval."%kind)
	props.putFloat(spProps, "FILLFACTOR", fill, 1.0, ctx.full)

	if reg.uncertainty is not None:
		uLo, uHi = [conv(v[0]) for v in reg.uncertainty.getBounds()]
		if _isFinite(uLo) and _isFinite(uHi):
			spProps["ERROR"] = props.getFmt(fmtSource, "ERROR", 0, 15)%(
				0.5*abs(uHi-uLo))


def _getSpectralUnit(ctx, frame, spProps):
	"""returns the unit spectral values are written in.
	"""
	if _retainUnits(spProps):
		unit = spProps.get("UNIT") or "Hz"
		try:
			units.getSpectralSystem(unit)
		except STCUnitError:
			ctx.reject("Illegal STC-S units '%s' found in property tree."%unit)
		return unit

	unit = frame.getUnit(0)
	system = frame.system
	if system not in writableSpectralUnits:
		system = "FREQ"
	if unit not in writableSpectralUnits[system]:
		unit = units.defaultSpectralUnits[system]
	return unit


def _writeSpectral(ctx, reg, spProps):
	frame = reg.frame
	unit = _getSpectralUnit(ctx, frame, spProps)
	conv = lambda val: val
	if unit!=frame.getUnit(0):
		try:
			conv = units.getSpectralConv(frame.getUnit(0), unit)
		except (STCUnitError, KeyError):
			ctx.reject("Cannot convert spectral unit '%s' to '%s'."%(
				frame.getUnit(0), unit))

	_writeOneDim(ctx, reg, spProps, conv, "spectral",
		spProps.get("UNIT", "Hz")==unit)
	_writeStdOfRest(ctx, frame, spProps)
	props.putString(spProps, "UNIT", unit, "Hz", ctx.full)


def _getRedshiftSystem(ctx, frame, spProps):
	if _retainUnits(spProps):
		dopplerDef = spProps.get("DOPPLERDEF", "OPTICAL")
		type = spProps.get("TYPE", "VELOCITY")
		if type not in ["VELOCITY", "REDSHIFT"]:
			ctx.reject("Illegal STC-S Redshift Type '%s' found in property"
				" tree."%type)
		if dopplerDef not in ["OPTICAL", "RADIO", "RELATIVISTIC"]:
			ctx.reject("Illegal STC-S DopplerDef '%s' found in property"
				" tree."%dopplerDef)
		if (type, dopplerDef) not in redshiftSystemForType:
			ctx.reject("Unsupported combination of DopplerDef='%s' and"
				" Type='%s' found in property tree."%(dopplerDef, type))
		return redshiftSystemForType[type, dopplerDef]

	if frame.system not in units.redshiftSystems:
		ctx.reject("Redshift system '%s' is unsupported by STC-S."%frame.system)
	return frame.system


def _writeRedshift(ctx, reg, spProps):
	frame = reg.frame
	system = _getRedshiftSystem(ctx, frame, spProps)
	if system=="REDSHIFT":
		unit = ""
	else:
		unit = units.defaultVelocityUnit
	try:
		conv = units.getRedshiftConv(frame.system,
			frame.getUnit(0) or units.defaultVelocityUnit,
			system, unit or units.defaultVelocityUnit)
	except STCUnitError:
		ctx.reject("Cannot convert redshift unit '%s' to '%s'."%(
			frame.getUnit(0), unit))

	_writeOneDim(ctx, reg, spProps, conv, "redshift",
		spProps.get("UNIT", unit or "nil")==(unit or "nil"))
	_writeStdOfRest(ctx, frame, spProps)
	type, dopplerDef = typeForRedshiftSystem[system]
	props.putString(spProps, "DOPPLERDEF", dopplerDef, "OPTICAL", ctx.full)
	props.putString(spProps, "TYPE", type, "VELOCITY", ctx.full)
	props.putString(spProps, "UNIT", unit or "nil", unit or "nil", ctx.full)


############## Regions to property trees

def writeRegion(ctx, reg, tree):
	"""adds the STC-S properties of reg to the property tree tree.

	Rejections raise STCSWriteError.
	"""
	if reg.mapping is not None:
		reg = reg.simplify()
		if reg.mapping is not None:
			ctx.reject("The supplied region does not have a supported shape"
				" within its current coordinate system.")

	groups, isSky = classifyAxes(reg.frame, ctx.warn)
	if not any(groups.values()):
		ctx.reject("The supplied region has no axes that can be written as"
			" STC-S.")

	for kind, writer in [
			("time", _writeTime),
			("space", lambda ctx, sub, spProps: _writeSpace(ctx, sub, spProps,
				isSky)),
			("spectral", _writeSpectral),
			("redshift", _writeRedshift)]:
		if not groups[kind]:
			continue
		sub = reg.pickAxes(groups[kind])
		if sub is None:
			ctx.reject("Cannot determine the region covered by the %s axes."%kind)
		writer(ctx, sub, _getSubphraseProps(tree, kind))


def _copyTree(tree):
	return dict((key, dict(val)) for key, val in tree.items()
		if key in subphraseKeys)


def _unpackObject(ctx, obj):
	"""returns area, coords and a property tree for what can be passed
	to getPropertyTree.
	"""
	if isinstance(obj, regions.Region):
		return obj, None, {}

	if not isinstance(obj, dict):
		ctx.reject("Cannot write out a %s as STC-S."%obj.__class__.__name__)
	if props.isPropertyTree(obj):
		return None, None, _copyTree(obj)

	area, coords, tree = obj.get("AREA"), obj.get("COORDS"), obj.get("PROPS")
	for name, val, cls in [
			("AREA", area, regions.Region),
			("COORDS", coords, regions.Region),
			("PROPS", tree, dict)]:
		if val is not None and not isinstance(val, cls):
			ctx.reject("The supplied dict contains a %s called '%s'. But '%s'"
				" should be a %s (programming error)."%(
				val.__class__.__name__, name, name, cls.__name__))
	if area is None and coords is None and tree is None:
		ctx.reject("The supplied dict does not contain anything that can be"
			" written out as STC-S.")
	if (area is not None and coords is not None
			and area.frame.naxes!=coords.frame.naxes):
		ctx.reject("Cannot convert between the co-ordinate frame of the COORDS"
			" region and the co-ordinate frame of the AREA region.")
	return area, coords, _copyTree(tree or {})


def getPropertyTree(obj, full=False, defDigits=None, warnings=None):
	"""returns a property tree describing obj.

	obj can be a region (written as area), a property tree, or a dict
	with the keys AREA, COORDS and PROPS (all optional).  Warnings are
	appended to the list warnings if given.  The property tree passed in
	is not changed.
	"""
	ctx = WriteContext(full, defDigits, warnings)
	area, coords, tree = _unpackObject(ctx, obj)
	ctx.origIds = dict((key[:-6].lower(), val.get("ID"))
		for key, val in tree.items())

	# area comes last so its sub-phrase IDs win
	if coords is not None:
		writeRegion(ctx, coords, tree)
	if area is not None:
		writeRegion(ctx, area, tree)
	return tree


############## Flattening of property trees

def _joinWithNull(strList):
	return " ".join(s for s in strList if s is not None)


def _joinKeysWithNull(node, kwList, flatteners):
	"""returns a string made up of the non-null values in kwList in node.
	"""
	res = []
	for key in kwList:
		if key not in node or node[key] is None:
			pass
		elif key in flatteners:
			res.append(flatteners[key](node[key], node))
		else:
			res.append(str(node[key]))
	return _joinWithNull(res)


def _makeKeywordFlattener(keyword):
	def flatten(val, node):
		return "%s %s"%(keyword, val)
	return flatten


def _makePosFlattener(keyword):
	def flatten(val, node):
		if node.get("ID")==keyword:
			return val
		return "%s %s"%(keyword, val)
	return flatten


def _flattenFlavor(val, node):
	if "FLAVOUR" not in node:
		return val


_commonFlatteners = {
	"FILLFACTOR": _makeKeywordFlattener("fillfactor"),
	"UNIT": _makeKeywordFlattener("unit"),
	"ERROR": _makeKeywordFlattener("Error"),
	"RESOLUTION": _makeKeywordFlattener("Resolution"),
	"SIZE": _makeKeywordFlattener("Size"),
	"PIXSIZE": _makeKeywordFlattener("PixSize"),
	"FLAVOR": _flattenFlavor,
	"TIME": _makePosFlattener("Time"),
	"POSITION": _makePosFlattener("Position"),
	"SPECTRAL": _makePosFlattener("Spectral"),
	"REDSHIFT": _makePosFlattener("Redshift"),
}

_trailingKeys = ["UNIT", "ERROR", "RESOLUTION"]

subphraseKeyLists = [
	("TIME_PROPS", ["ID", "FILLFACTOR", "TIMESCALE", "REFPOS", "START",
		"STOP", "TIME"]+_trailingKeys+["PIXSIZE"]),
	("SPACE_PROPS", ["ID", "FILLFACTOR", "FRAME", "REFPOS", "FLAVOUR",
		"FLAVOR", "LOLIMIT", "HILIMIT", "CENTRE", "BSIZE", "RADIUS", "RADIUS1",
		"RADIUS2", "POSANGLE", "VERTICES", "POSITION"]+_trailingKeys+[
		"SIZE", "PIXSIZE"]),
	("SPECTRAL_PROPS", ["ID", "FILLFACTOR", "REFPOS", "LOLIMIT", "HILIMIT",
		"SPECTRAL"]+_trailingKeys+["PIXSIZE"]),
	("REDSHIFT_PROPS", ["ID", "FILLFACTOR", "REFPOS", "TYPE", "DOPPLERDEF",
		"LOLIMIT", "HILIMIT", "REDSHIFT"]+_trailingKeys+["PIXSIZE"]),
]


def flattenProps(tree):
	"""returns a list of STC-S lines, one per sub-phrase in tree.
	"""
	return [_joinKeysWithNull(tree[key], kwList, _commonFlatteners)
		for key, kwList in subphraseKeyLists
		if tree.get(key)]


def getSTCSLines(obj, full=False, defDigits=None, warnings=None):
	"""returns a list of STC-S lines for obj.

	See getPropertyTree for what obj can be.
	"""
	return flattenProps(getPropertyTree(obj, full, defDigits, warnings))
