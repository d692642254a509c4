"""
Regions within coordinate frames.

A region is bound to one frame and may carry a fill factor (None means
undefined, i.e., 1), an uncertainty region (a region in the same frame)
and a mapping (the transformation from the region's base frame to the
frame it is described in; None means identity).

Region kinds are Interval, Box, Circle, Ellipse, Polygon, PointList,
NullRegion and Prism (the product of regions in independent frames).
All regions can give their bounds and pick a subset of their axes.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import copy
import math

import numpy

from stcscodec import frames
from stcscodec.common import *


INF = float("inf")


class LinearMapping(object):
	"""is an affine mapping x -> matrix.x+shift.
	"""
	def __init__(self, matrix, shift=None):
		self.matrix = numpy.array(matrix, dtype=float)
		if shift is None:
			shift = numpy.zeros(self.matrix.shape[0])
		self.shift = numpy.array(shift, dtype=float)

	def __repr__(self):
		return "<LinearMapping %s+%s>"%(self.matrix.tolist(), self.shift.tolist())

	def __call__(self, point):
		return tuple(numpy.dot(self.matrix, point)+self.shift)

	def isIdentity(self):
		n = self.matrix.shape[0]
		return (self.matrix.shape==(n, n)
			and numpy.allclose(self.matrix, numpy.identity(n), rtol=0, atol=1e-12)
			and numpy.allclose(self.shift, 0, rtol=0, atol=1e-12))

	def then(self, other):
		"""returns the mapping applying self, then other.
		"""
		return LinearMapping(numpy.dot(other.matrix, self.matrix),
			numpy.dot(other.matrix, self.shift)+other.shift)


def _getLonRange(frame, lons):
	"""returns (min, max) of a set of longitudes, keeping the range below
	2 pi if the values cluster around 0.
	"""
	ref = lons[0]
	offsets = [frame.axDistance(0, ref, lon) for lon in lons]
	return ref+min(offsets), ref+max(offsets)


class Region(object):
	"""is an abstract base for regions.

	Deriving classes need to define _getBounds(), returning a pair of
	lower and upper bounds (sequences of floats, infinities for unbounded
	axes).
	"""
	regionType = None

	def __init__(self, frame, uncertainty=None, fillFactor=None,
			mapping=None):
		self.frame = frame
		self.uncertainty = uncertainty
		self.fillFactor = fillFactor
		self.mapping = mapping

	def __repr__(self):
		return "<%s in %r>"%(self.regionType, self.frame)

	@property
	def naxes(self):
		return self.frame.naxes

	def _checkPoint(self, point):
		if len(point)!=self.naxes:
			raise STCValueError("%s needs %d-dimensional points, got %s"%(
				self.regionType, self.naxes, point))
		return tuple(float(v) for v in point)

	def copy(self):
		return copy.copy(self)

	def getBounds(self):
		"""returns the lower and upper bounds of the region's bounding box
		as two lists.
		"""
		return self._getBounds()

	def getCentre(self):
		"""returns the centre of the bounding box, i.e., the point half way
		between the box's corners.

		Infinite bounds are replaced by the finite bound on the same axis
		(or 0 if there is none).
		"""
		lbnd, ubnd = self.getBounds()
		lbnd, ubnd = list(lbnd), list(ubnd)
		for i in range(len(lbnd)):
			if math.isinf(lbnd[i]) and not math.isinf(ubnd[i]):
				lbnd[i] = ubnd[i]
			elif math.isinf(ubnd[i]) and not math.isinf(lbnd[i]):
				ubnd[i] = lbnd[i]
			elif math.isinf(lbnd[i]) and math.isinf(ubnd[i]):
				lbnd[i] = ubnd[i] = 0.
		return self.frame.offset(lbnd, ubnd, self.frame.distance(lbnd, ubnd)/2)

	def mapped(self, mapping):
		"""returns a copy of the region with mapping applied after any
		existing mapping.
		"""
		res = self.copy()
		if self.mapping is None:
			res.mapping = mapping
		else:
			res.mapping = self.mapping.then(mapping)
		return res

	def simplify(self):
		"""returns a simplified version of the region.

		Identity mappings are removed; other mappings are kept.
		"""
		if self.mapping is not None and self.mapping.isIdentity():
			res = self.copy()
			res.mapping = None
			return res
		return self

	def pickAxes(self, axes):
		"""returns a region covering the given axes or None if the region
		cannot be separated along these axes.
		"""
		axes = list(axes)
		if axes==list(range(self.naxes)):
			return self
		if self.mapping is not None:
			return None
		return self._pickAxes(axes)

	def _pickAxes(self, axes):
		return None

	def _adoptAttributes(self, picked, axes):
		picked.fillFactor = self.fillFactor
		if self.uncertainty is not None:
			picked.uncertainty = self.uncertainty.pickAxes(axes)
		return picked


class Interval(Region):
	"""is a (possibly half-open) axis-aligned interval.

	lbnd and ubnd are sequences with one item per axis; None marks an
	unbounded side.
	"""
	regionType = "Interval"

	def __init__(self, frame, lbnd, ubnd, **kwargs):
		Region.__init__(self, frame, **kwargs)
		if len(lbnd)!=frame.naxes or len(ubnd)!=frame.naxes:
			raise STCValueError("Interval bounds must have %d items"%frame.naxes)
		self.lbnd = [None if v is None else float(v) for v in lbnd]
		self.ubnd = [None if v is None else float(v) for v in ubnd]
		for lo, hi in zip(self.lbnd, self.ubnd):
			if lo is not None and hi is not None and lo>hi:
				raise STCValueError("Interval lower bound %s above upper bound %s"%(
					lo, hi))

	def _getBounds(self):
		return ([-INF if v is None else v for v in self.lbnd],
			[INF if v is None else v for v in self.ubnd])

	def isBounded(self):
		return None not in self.lbnd and None not in self.ubnd

	def _pickAxes(self, axes):
		return self._adoptAttributes(Interval(self.frame.pickAxes(axes),
			[self.lbnd[i] for i in axes], [self.ubnd[i] for i in axes]), axes)


class Box(Region):
	"""is an axis-aligned box given by its centre and one corner.
	"""
	regionType = "Box"

	def __init__(self, frame, centre, corner, **kwargs):
		Region.__init__(self, frame, **kwargs)
		self.centre = self._checkPoint(centre)
		self.corner = self._checkPoint(corner)

	@classmethod
	def fromCorners(cls, frame, lower, upper, **kwargs):
		centre = [(a+b)/2. for a, b in zip(lower, upper)]
		return cls(frame, centre, upper, **kwargs)

	def getHalfWidths(self):
		return [abs(self.frame.axDistance(i, c, k))
			for i, (c, k) in enumerate(zip(self.centre, self.corner))]

	def _getBounds(self):
		halfWidths = self.getHalfWidths()
		return ([c-h for c, h in zip(self.centre, halfWidths)],
			[c+h for c, h in zip(self.centre, halfWidths)])

	def _pickAxes(self, axes):
		return self._adoptAttributes(Box(self.frame.pickAxes(axes),
			[self.centre[i] for i in axes], [self.corner[i] for i in axes]),
			axes)


class Circle(Region):
	"""is a circle (or sphere) around centre.
	"""
	regionType = "Circle"

	def __init__(self, frame, centre, radius, **kwargs):
		Region.__init__(self, frame, **kwargs)
		self.centre = self._checkPoint(centre)
		self.radius = float(radius)
		if self.radius<0:
			raise STCValueError("Negative circle radius %s"%radius)

	def _getBounds(self):
		if isinstance(self.frame, frames.SkyFrame):
			lon, lat = self.centre
			if abs(lat)+self.radius>=math.pi/2:
				return [0, max(-math.pi/2, lat-self.radius)], [
					2*math.pi, min(math.pi/2, lat+self.radius)]
			dLon = math.asin(min(1, math.sin(self.radius)/math.cos(lat)))
			return [lon-dLon, lat-self.radius], [lon+dLon, lat+self.radius]
		return ([c-self.radius for c in self.centre],
			[c+self.radius for c in self.centre])


class Ellipse(Region):
	"""is an ellipse in a two-axis frame.

	radii are the semi-major and semi-minor axes.  The angle (in rad) of
	the first radius is measured from the second axis towards the first
	axis in sky frames and from the first axis towards the second axis in
	other frames.
	"""
	regionType = "Ellipse"

	def __init__(self, frame, centre, radii, angle, **kwargs):
		Region.__init__(self, frame, **kwargs)
		if frame.naxes!=2:
			raise STCValueError("Ellipses need two-axis frames")
		self.centre = self._checkPoint(centre)
		self.radii = tuple(float(r) for r in radii)
		self.angle = float(angle)

	def _getBounds(self):
		a, b = self.radii
		if isinstance(self.frame, frames.SkyFrame):
			sinA, cosA = math.sin(self.angle), math.cos(self.angle)
		else:
			cosA, sinA = math.cos(self.angle), math.sin(self.angle)
		halfX = math.sqrt((a*cosA)**2+(b*sinA)**2)
		halfY = math.sqrt((a*sinA)**2+(b*cosA)**2)
		if isinstance(self.frame, frames.SkyFrame):
			halfX, halfY = halfY, halfX
			lat = self.centre[1]
			if abs(lat)+halfY>=math.pi/2:
				return [0, max(-math.pi/2, lat-halfY)], [
					2*math.pi, min(math.pi/2, lat+halfY)]
			halfX = halfX/math.cos(lat)
		return ([self.centre[0]-halfX, self.centre[1]-halfY],
			[self.centre[0]+halfX, self.centre[1]+halfY])


class Polygon(Region):
	"""is a polygon in a two-axis frame given by its vertices.

	Polygons built from boxes may keep the box's centre and full sizes
	in boxCentre and boxSize.
	"""
	regionType = "Polygon"

	def __init__(self, frame, vertices, boxCentre=None, boxSize=None,
			**kwargs):
		Region.__init__(self, frame, **kwargs)
		if frame.naxes!=2:
			raise STCValueError("Polygons need two-axis frames")
		self.vertices = [self._checkPoint(v) for v in vertices]
		if len(self.vertices)<3:
			raise STCValueError("Polygons need at least three vertices")
		self.boxCentre, self.boxSize = boxCentre, boxSize

	def _getBounds(self):
		lats = [v[1] for v in self.vertices]
		if isinstance(self.frame, frames.SkyFrame):
			lonMin, lonMax = _getLonRange(self.frame,
				[v[0] for v in self.vertices])
		else:
			lonMin = min(v[0] for v in self.vertices)
			lonMax = max(v[0] for v in self.vertices)
		return [lonMin, min(lats)], [lonMax, max(lats)]


class PointList(Region):
	"""is a set of points.
	"""
	regionType = "PointList"

	def __init__(self, frame, points, **kwargs):
		Region.__init__(self, frame, **kwargs)
		self.points = [self._checkPoint(p) for p in points]
		if not self.points:
			raise STCValueError("Empty point list")

	def _getBounds(self):
		lbnd, ubnd = [], []
		for axis in range(self.naxes):
			vals = [p[axis] for p in self.points]
			if isinstance(self.frame, frames.SkyFrame) and axis==0:
				lo, hi = _getLonRange(self.frame, vals)
			else:
				lo, hi = min(vals), max(vals)
			lbnd.append(lo)
			ubnd.append(hi)
		return lbnd, ubnd

	def _pickAxes(self, axes):
		return self._adoptAttributes(PointList(self.frame.pickAxes(axes),
			[[p[i] for i in axes] for p in self.points]), axes)


class NullRegion(Region):
	"""is a region containing no points or, if negated, all points.
	"""
	regionType = "NullRegion"

	def __init__(self, frame, negated=False, **kwargs):
		Region.__init__(self, frame, **kwargs)
		self.negated = negated

	def _getBounds(self):
		if not self.negated:
			return [INF]*self.naxes, [-INF]*self.naxes
		if isinstance(self.frame, frames.SkyFrame):
			return [0, -math.pi/2], [2*math.pi, math.pi/2]
		return [-INF]*self.naxes, [INF]*self.naxes

	def _pickAxes(self, axes):
		return self._adoptAttributes(NullRegion(self.frame.pickAxes(axes),
			self.negated), axes)


class Prism(Region):
	"""is the product of regions over independent frames.

	The prism's frame is a CmpFrame of the component frames.  Unless
	set explicitly, the uncertainty of a prism is the prism of its
	components' uncertainties, if all components have one.
	"""
	regionType = "Prism"

	def __init__(self, components, **kwargs):
		self.components = list(components)
		if not self.components:
			raise STCValueError("Prisms need at least one component")
		self._uncertainty = None
		Region.__init__(self, frames.CmpFrame(
			[c.frame for c in self.components]), **kwargs)

	def __repr__(self):
		return "<Prism of %s>"%(", ".join(repr(c) for c in self.components))

	def _getUncertainty(self):
		if self._uncertainty is not None:
			return self._uncertainty
		uncs = [c.uncertainty for c in self.components]
		if None in uncs:
			return None
		return Prism(uncs)

	def _setUncertainty(self, unc):
		self._uncertainty = unc

	uncertainty = property(_getUncertainty, _setUncertainty)

	def _getBounds(self):
		lbnd, ubnd = [], []
		for c in self.components:
			lo, hi = c.getBounds()
			lbnd.extend(lo)
			ubnd.extend(hi)
		return lbnd, ubnd

	def simplify(self):
		"""returns a flattened prism of simplified components, or the only
		component if there is just one.
		"""
		flattened = []
		for c in self.components:
			c = c.simplify()
			if isinstance(c, Prism) and c.mapping is None:
				flattened.extend(c.components)
			else:
				flattened.append(c)
		mapping = self.mapping
		if mapping is not None and mapping.isIdentity():
			mapping = None
		if len(flattened)==1 and mapping is None and self._uncertainty is None:
			return flattened[0]
		res = Prism(flattened, fillFactor=self.fillFactor, mapping=mapping)
		res._uncertainty = self._uncertainty
		return res

	def pickAxes(self, axes):
		axes = list(axes)
		if axes==list(range(self.naxes)):
			return self
		if self.mapping is not None:
			return None
		picked, start = [], 0
		for c in self.components:
			localAxes = [a-start for a in axes if start<=a<start+c.naxes]
			if localAxes:
				sub = c.pickAxes(localAxes)
				if sub is None:
					return None
				picked.append(sub)
			start += c.naxes
		if len(picked)==1:
			return picked[0]
		return Prism(picked)
