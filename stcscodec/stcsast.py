"""
Building regions from parsed STC-S sub-phrases.

finishSubphrase turns the values a parser collected for one sub-phrase
into an area region (the enclosure, if any) and a coords region (the
position, if any), attaching fill factors and uncertainties.  assemble
combines the sub-phrases into the objects a read returns.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import math

from stcscodec import frames
from stcscodec import props
from stcscodec import regions
from stcscodec import units
from stcscodec.common import *


def _scaled(vals, scale):
	return [v*scale for v in vals]


def setUnc(reg1, reg2, frame, errors, scale):
	"""attaches a box of half widths errors (in STC-S units, converted
	with scale) around the centre of reg1 (or reg2 if reg1 is None) as
	uncertainty to both regions.

	Both regions get the same box instance.  For sky frames, the
	longitude error is turned into a longitude increment at the centre's
	latitude.
	"""
	if errors is None:
		return
	reg = reg1 or reg2
	if reg is None:
		return

	centre = list(reg.getCentre())
	err = _scaled(errors, scale)
	if isinstance(frame, frames.SkyFrame):
		displaced, _ = frame.offset2(centre, math.pi/2, err[0])
		err[0] = abs(frame.axDistance(0, centre[0], displaced[0]))
	unc = regions.Box(frame, centre, [c+e for c, e in zip(centre, err)])

	for reg in [reg1, reg2]:
		if reg is not None:
			reg.uncertainty = unc
	return unc


def boxCorners(frame, centre, size):
	"""returns the vertices of a box of full widths size around centre.

	The edges are geodesics of frame, i.e., great circles for sky frames.
	The vertices come in the order top left, top right, bottom right,
	bottom left for sky frames and bottom left, bottom right, top right,
	top left otherwise.
	"""
	bw, bh = size[0]/2., size[1]/2.
	right1, pa = frame.offset2(centre, math.pi/2, bw)
	right2, _ = frame.offset2(right1, pa+math.pi/2, bh)
	left1, pa = frame.offset2(centre, -math.pi/2, bw)
	left2, _ = frame.offset2(left1, pa+math.pi/2, bh)
	top1, pa = frame.offset2(centre, 0, bh)
	top2, _ = frame.offset2(top1, pa+math.pi/2, bw)
	bottom1, pa = frame.offset2(centre, math.pi, bh)
	bottom2, _ = frame.offset2(bottom1, pa+math.pi/2, bw)

	corners = []
	for (a1, a2), (b1, b2) in [
			((left1, left2), (top1, top2)),
			((right1, right2), (top1, top2)),
			((right1, right2), (bottom1, bottom2)),
			((left1, left2), (bottom1, bottom2))]:
		corner = frame.intersect(a1, a2, b1, b2)
		if corner is None:
			raise STCValueError("Degenerate Box of size %s"%(list(size),))
		corners.append(tuple(corner))

	if isinstance(frame, frames.SkyFrame):
		return corners
	tl, tr, br, bl = corners
	return [bl, br, tr, tl]


def _finishTime(sub):
	frame = sub.frame
	if sub.epoch is not None:
		frame.timeOrigin = frame.epoch = sub.epoch
	origin = frame.timeOrigin

	def rel(val):
		if val is None:
			return None
		return val-origin

	if sub.start is not None or sub.stop is not None:
		sub.area = regions.Interval(frame, [rel(sub.start)], [rel(sub.stop)])
		sub.hasEnclosure = True
	elif sub.value is not None:
		sub.area = regions.PointList(frame, [[rel(sub.value)]])
	if sub.value is not None:
		sub.coords = regions.PointList(frame, [[rel(sub.value)]])


def _finishSpace(sub):
	frame, scale = sub.frame, sub.scale
	id = sub.id

	if id=="PositionInterval":
		sub.area = regions.Box.fromCorners(frame,
			_scaled(sub.lolim, scale), _scaled(sub.hilim, scale))
	elif id=="AllSky":
		sub.area = regions.NullRegion(frame, negated=True)
	elif id=="Circle":
		sub.area = regions.Circle(frame, _scaled(sub.centre, scale),
			sub.radius*scale)
	elif id=="Ellipse":
		posAngle = sub.posAngle
		if not sub.isSky:
			posAngle = 90-posAngle
		sub.area = regions.Ellipse(frame, _scaled(sub.centre, scale),
			_scaled(sub.radii, scale), posAngle*units.toRad)
	elif id=="Box":
		centre, size = _scaled(sub.centre, scale), _scaled(sub.boxSize, scale)
		if sub.naxes==2:
			sub.area = regions.Polygon(frame, boxCorners(frame, centre, size),
				boxCentre=centre, boxSize=size)
		else:
			sub.area = regions.Box(frame, centre,
				[c+s/2. for c, s in zip(centre, size)])
	elif id=="Polygon":
		sub.area = regions.Polygon(frame,
			[_scaled(v, scale) for v in sub.vertices])

	if sub.area is not None:
		sub.hasEnclosure = True
	if sub.value is not None:
		pos = _scaled(sub.value, scale)
		sub.coords = regions.PointList(frame, [pos])
		if sub.area is None:
			sub.area = regions.PointList(frame, [pos])


def _finishSpectral(sub):
	frame = sub.frame
	if sub.lolim is not None:
		sub.area = regions.Interval(frame, [sub.lolim], [sub.hilim])
		sub.hasEnclosure = True
	elif sub.value is not None:
		sub.area = regions.PointList(frame, [[sub.value]])
	if sub.value is not None:
		sub.coords = regions.PointList(frame, [[sub.value]])

_finishRedshift = _finishSpectral


_finishers = {
	"time": _finishTime,
	"space": _finishSpace,
	"spectral": _finishSpectral,
	"redshift": _finishRedshift,
}


def finishSubphrase(sub):
	"""sets the area and coords attributes of the SubPhrase sub.
	"""
	try:
		_finishers[sub.kind](sub)
	except STCValueError as ex:
		raise STCSParseError("Bad %s sub-phrase: %s"%(sub.kind, ex.msg),
			expr=sub.id)
	for reg in [sub.area, sub.coords]:
		if reg is not None and sub.fill is not None:
			reg.fillFactor = sub.fill
	setUnc(sub.area, sub.coords, sub.frame, sub.errors, sub.scale)


def _fold(regs):
	"""returns the product of regs.
	"""
	res = regs[0]
	for reg in regs[1:]:
		res = regions.Prism([res, reg])
	return res.simplify()


subphraseOrder = ["time", "space", "spectral", "redshift"]


def assemble(subphrases, wantArea=True, wantCoords=False, wantProps=False):
	"""returns what a read of an STC-S description returns.

	subphrases is a dict as returned by stcsparse.parseSubphrases.  If
	exactly one of the want flags is true, the corresponding object (or
	None) is returned.  If more than one is true, a dict with the keys
	AREA, COORDS and PROPS is returned; it only has keys for what was
	requested and could be built.

	The area is only built when at least one sub-phrase has an enclosure
	(an interval or a shape); coords only when all sub-phrases present
	have positions.
	"""
	if not (wantArea or wantCoords or wantProps):
		raise STCSSelectionError("Reading STC-S was requested to return"
			" neither area, coords, nor properties")

	present = [subphrases[k] for k in subphraseOrder if k in subphrases]
	res = {}

	if wantArea and any(s.hasEnclosure for s in present):
		res["AREA"] = _fold([s.area for s in present if s.area is not None])

	if wantCoords and present and all(s.coords is not None for s in present):
		res["COORDS"] = _fold([s.coords for s in present])

	if wantProps:
		res["PROPS"] = props.makePropertyTree(dict(
			(s.kind.upper()+"_PROPS", s.props) for s in present))

	if len([w for w in (wantArea, wantCoords, wantProps) if w])==1:
		if res:
			return list(res.values())[0]
		return None
	return res
