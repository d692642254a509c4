"""
Coordinate system descriptors.

There are five kinds of frames: basic (cartesian) frames, sky frames,
time frames, spectral frames and redshift frames (the latter two are both
SpecFrames, distinguished by their domain).  A CmpFrame concatenates the
axes of several frames.

Frames also provide the geodesic primitives the region code needs:
offset, offset2, intersect, distance and axDistance.  Basic, time and
spectral frames are flat, sky frames work on the unit sphere, with
longitude and latitude in rad.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import copy
import math

from stcscodec import sphermath
from stcscodec.common import *


class CoordFrame(object):
	"""is the base class of coordinate system descriptors.

	Frames are flat (cartesian) unless they override the geodesic
	primitives.
	"""
	kind = None

	def __init__(self, naxes, units=None, domain=None, digits=7):
		self.naxes = naxes
		if units is None:
			units = [None]*naxes
		elif isinstance(units, str):
			units = [units]*naxes
		if len(units)!=naxes:
			raise STCValueError("%d units given for a frame with %d axes"%(
				len(units), naxes))
		self.units = list(units)
		self.domain = domain
		self.digits = digits
		self.activeUnit = False
		self.epoch = None

	def __repr__(self):
		return "<%s %s>"%(self.__class__.__name__, self.domain)

	def copy(self):
		res = copy.copy(self)
		res.units = self.units[:]
		return res

	def getUnit(self, axis):
		return self.units[axis]

	def setUnit(self, axis, unit):
		self.units[axis] = unit

	def getPrimaryFrame(self, axis):
		"""returns the frame axis belongs to and its index within that frame.
		"""
		if not 0<=axis<self.naxes:
			raise STCValueError("Axis %d does not exist in a %d-axis frame"%(
				axis, self.naxes))
		return self, axis

	def pickAxes(self, axes):
		"""returns a frame for the axes (a sequence of axis indices) of this
		frame.
		"""
		axes = list(axes)
		if axes==list(range(self.naxes)):
			return self
		res = BasicFrame(len(axes), [self.units[i] for i in axes],
			domain=self.domain, digits=self.digits)
		res.activeUnit = self.activeUnit
		return res

	def _checkPoint(self, point):
		if len(point)!=self.naxes:
			raise STCValueError("Point %s does not match a %d-axis frame"%(
				point, self.naxes))

	def distance(self, p1, p2):
		self._checkPoint(p1)
		self._checkPoint(p2)
		return math.sqrt(sum((b-a)**2 for a, b in zip(p1, p2)))

	def axDistance(self, axis, v1, v2):
		"""returns the signed increment from v1 to v2 on axis.
		"""
		return v2-v1

	def offset(self, p1, p2, dist):
		"""returns the point dist away from p1 in the direction of p2.
		"""
		total = self.distance(p1, p2)
		if total==0:
			return tuple(p1)
		return tuple(a+(b-a)*dist/total for a, b in zip(p1, p2))

	def offset2(self, point, angle, dist):
		"""returns the point dist away from the 2-d point in the direction
		angle and the direction at the new point.

		angle is measured from the second axis towards the first axis.
		"""
		if self.naxes!=2:
			raise STCValueError("offset2 needs a 2-axis frame")
		return (point[0]+dist*math.sin(angle), point[1]+dist*math.cos(angle)
			), angle

	def intersect(self, a1, a2, b1, b2):
		"""returns the intersection of the line through a1 and a2 with
		the line through b1 and b2 in a 2-axis frame.

		None is returned for parallel lines.
		"""
		if self.naxes!=2:
			raise STCValueError("intersect needs a 2-axis frame")
		dax, day = a2[0]-a1[0], a2[1]-a1[1]
		dbx, dby = b2[0]-b1[0], b2[1]-b1[1]
		denom = dax*dby-day*dbx
		if denom==0:
			return None
		t = ((b1[0]-a1[0])*dby-(b1[1]-a1[1])*dbx)/denom
		return (a1[0]+t*dax, a1[1]+t*day)


class BasicFrame(CoordFrame):
	"""is a cartesian frame with arbitrary units.
	"""
	kind = "basic"


class SkyFrame(CoordFrame):
	"""is a celestial frame with a longitude and a latitude axis in rad.
	"""
	kind = "sky"
	defaultEquinoxes = {
		"FK4": 1950.0,
		"FK5": 2000.0,
		"ECLIPTIC": 2000.0,
	}

	def __init__(self, system="ICRS", equinox=None, refPos=None,
			domain="SKY", digits=7):
		CoordFrame.__init__(self, 2, "rad", domain, digits)
		self.refPos = refPos
		self.system = system
		if equinox is not None:
			self.equinox = equinox

	def __repr__(self):
		return "<SkyFrame %s>"%self.system

	def _getSystem(self):
		return self._system

	def _setSystem(self, system):
		self._system = system
		self.equinox = self.defaultEquinoxes.get(system)

	system = property(_getSystem, _setSystem)

	def pickAxes(self, axes):
		axes = list(axes)
		if axes==[0, 1]:
			return self
		return CoordFrame.pickAxes(self, axes)

	def distance(self, p1, p2):
		return sphermath.getGCDist(p1, p2)

	def axDistance(self, axis, v1, v2):
		if axis==0:
			diff = math.fmod(v2-v1, 2*math.pi)
			if diff>math.pi:
				diff -= 2*math.pi
			elif diff<=-math.pi:
				diff += 2*math.pi
			return diff
		return v2-v1

	def offset(self, p1, p2, dist):
		if tuple(p1)==tuple(p2):
			return tuple(p1)
		return sphermath.getGCOffset(p1, sphermath.getBearing(p1, p2), dist)[0]

	def offset2(self, point, angle, dist):
		return sphermath.getGCOffset(point, angle, dist)

	def intersect(self, a1, a2, b1, b2):
		return sphermath.getGCIntersection(a1, a2, b1, b2)


class TimeFrame(CoordFrame):
	"""is a one-axis frame for times.

	Values are in days relative to timeOrigin (an MJD in timeScale).
	system is either MJD or JD; for JD frames, timeOrigin still is an
	MJD.
	"""
	kind = "time"

	def __init__(self, timeScale="TAI", timeOrigin=0., refPos=None,
			system="MJD", domain="TIME", digits=15):
		CoordFrame.__init__(self, 1, "d", domain, digits)
		self.timeScale, self.timeOrigin = timeScale, timeOrigin
		self.refPos, self.system = refPos, system
		self.epoch = None

	def __repr__(self):
		return "<TimeFrame %s>"%self.timeScale

	def toMJD(self, val):
		"""returns an absolute MJD for the frame value val.
		"""
		if self.system=="JD":
			return val+self.timeOrigin-mjdOffset
		return val+self.timeOrigin


class SpecFrame(CoordFrame):
	"""is a one-axis frame for spectral or redshift coordinates.

	Spectral frames have the domain SPECTRUM and a system FREQ, WAVELEN or
	ENERGY; redshift frames have the domain REDSHIFT and a system REDSHIFT,
	VOPTICAL, VRADIO or VREL.
	"""
	def __init__(self, system="FREQ", unit="Hz", stdOfRest=None,
			domain="SPECTRUM", digits=15):
		CoordFrame.__init__(self, 1, unit, domain, digits)
		self.system, self.stdOfRest = system, stdOfRest

	def __repr__(self):
		return "<SpecFrame %s %s>"%(self.domain, self.system)

	@property
	def kind(self):
		if self.domain=="SPECTRUM":
			return "spectral"
		elif self.domain=="REDSHIFT":
			return "redshift"


class CmpFrame(CoordFrame):
	"""is a frame built by concatenating the axes of several frames.
	"""
	kind = "compound"

	def __init__(self, frames):
		self.frames = list(frames)
		CoordFrame.__init__(self, sum(f.naxes for f in self.frames))

	def __repr__(self):
		return "<CmpFrame %s>"%(", ".join(repr(f) for f in self.frames))

	def _iterAxes(self):
		for frame in self.frames:
			for axis in range(frame.naxes):
				yield frame, axis

	def getPrimaryFrame(self, axis):
		CoordFrame.getPrimaryFrame(self, axis)
		frame, localAxis = list(self._iterAxes())[axis]
		return frame.getPrimaryFrame(localAxis)

	def getUnit(self, axis):
		frame, localAxis = self.getPrimaryFrame(axis)
		return frame.getUnit(localAxis)

	def setUnit(self, axis, unit):
		frame, localAxis = self.getPrimaryFrame(axis)
		frame.setUnit(localAxis, unit)

	def pickAxes(self, axes):
		axes = list(axes)
		if axes==list(range(self.naxes)):
			return self
		picked, start = [], 0
		for frame in self.frames:
			localAxes = [a-start for a in axes if start<=a<start+frame.naxes]
			if localAxes:
				picked.append(frame.pickAxes(localAxes))
			start += frame.naxes
		if len(picked)==1:
			return picked[0]
		return CmpFrame(picked)

	def _split(self, point):
		res, start = [], 0
		for frame in self.frames:
			res.append(point[start:start+frame.naxes])
			start += frame.naxes
		return res

	def distance(self, p1, p2):
		return math.sqrt(sum(f.distance(a, b)**2
			for f, a, b in zip(self.frames, self._split(p1), self._split(p2))))

	def axDistance(self, axis, v1, v2):
		frame, localAxis = self.getPrimaryFrame(axis)
		return frame.axDistance(localAxis, v1, v2)

	def offset(self, p1, p2, dist):
		total = self.distance(p1, p2)
		if total==0:
			return tuple(p1)
		res = []
		for f, a, b in zip(self.frames, self._split(p1), self._split(p2)):
			res.extend(f.offset(a, b, f.distance(a, b)*dist/total))
		return tuple(res)
