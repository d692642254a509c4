"""
Spherical geometry and related helper functions.

All angles are in rad.  Bearings (position angles) are measured from
the direction of increasing latitude towards increasing longitude.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.

import math

import numpy


def vabs(naVec):
	return math.sqrt(numpy.dot(naVec, naVec))


def normalize(naVec):
	"""returns naVec scaled to unit length.
	"""
	length = vabs(naVec)
	if length==0:
		return naVec
	return naVec/length


def spherToCart(theta, phi):
	"""returns a 3-cartesian unit vector pointing to longitude theta,
	latitude phi.
	"""
	cp = math.cos(phi)
	return numpy.array([math.cos(theta)*cp, math.sin(theta)*cp, math.sin(phi)])


def cartToSpher(unitvector):
	"""returns spherical coordinates for a 3-unit vector.

	We do not check if unitvector actually *is* a unit vector.
	"""
	x, y, z = unitvector
	rInXY = math.sqrt(x**2+y**2)
	if abs(rInXY)<1e-9:  # pole
		theta = 0
	else:
		theta = math.atan2(y, x)
	if theta<0:
		theta += 2*math.pi
	phi = math.atan2(z, rInXY)
	return (theta, phi)


def normalizeLon(theta):
	"""returns theta brought into [0, 2 pi).
	"""
	theta = math.fmod(theta, 2*math.pi)
	if theta<0:
		theta += 2*math.pi
	return theta


def getGCDist(pos1, pos2):
	"""returns the great circle distance between two (lon, lat) positions.
	"""
	v1, v2 = spherToCart(*pos1), spherToCart(*pos2)
	return math.atan2(vabs(numpy.cross(v1, v2)), numpy.dot(v1, v2))


def getBearing(pos1, pos2):
	"""returns the bearing at pos1 of the great circle towards pos2.
	"""
	lon1, lat1 = pos1
	lon2, lat2 = pos2
	dLon = lon2-lon1
	return math.atan2(math.sin(dLon)*math.cos(lat2),
		math.cos(lat1)*math.sin(lat2)-math.sin(lat1)*math.cos(lat2)*math.cos(dLon))


def getGCOffset(pos, bearing, dist):
	"""returns the position dist away from pos along the great circle
	leaving pos with bearing, and the bearing of the great circle at
	the new position.
	"""
	lon1, lat1 = pos
	sinLat2 = (math.sin(lat1)*math.cos(dist)
		+math.cos(lat1)*math.sin(dist)*math.cos(bearing))
	lat2 = math.asin(max(-1., min(1., sinLat2)))
	lon2 = lon1+math.atan2(math.sin(bearing)*math.sin(dist)*math.cos(lat1),
		math.cos(dist)-math.sin(lat1)*sinLat2)
	newPos = (normalizeLon(lon2), lat2)
	if dist==0:
		return newPos, bearing
	backBearing = getBearing(newPos, pos)
	return newPos, math.fmod(backBearing+math.pi, 2*math.pi)


def getEastwardDist(lat, lonDiff):
	"""returns the distance along the great circle leaving latitude lat
	due east after which the longitude has grown by lonDiff.

	This inverts getGCOffset(pos, pi/2, dist) with respect to longitude.
	"""
	return math.atan2(math.sin(lonDiff)*math.cos(lat), math.cos(lonDiff))


def getGCIntersection(a1, a2, b1, b2):
	"""returns the intersection of the great circles through a1, a2 and
	through b1, b2 closer to a1, or None if the circles coincide.
	"""
	n1 = numpy.cross(spherToCart(*a1), spherToCart(*a2))
	n2 = numpy.cross(spherToCart(*b1), spherToCart(*b2))
	isect = numpy.cross(n1, n2)
	if vabs(isect)<1e-15:
		return None
	isect = normalize(isect)
	if numpy.dot(isect, spherToCart(*a1))<0:
		isect = -isect
	return cartToSpher(isect)
