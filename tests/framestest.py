"""
Tests for coordinate frames and their geodesic primitives.
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.


import math

from stcscodec.helpers import testhelpers

from stcscodec import common
from stcscodec import frames
from stcscodec import sphermath
from stcscodec.units import toRad


class SphermathTest(testhelpers.VerboseTest):
	def testGCDist(self):
		self.assertAlmostEqual(sphermath.getGCDist((0, 0), (math.pi/2, 0)),
			math.pi/2)
		self.assertAlmostEqual(sphermath.getGCDist((1, math.pi/2), (2, math.pi/2)),
			0)

	def testBearingNorth(self):
		self.assertAlmostEqual(sphermath.getBearing((1, 0.2), (1, 0.5)), 0)

	def testBearingEast(self):
		self.assertAlmostEqual(sphermath.getBearing((0, 0), (0.1, 0)),
			math.pi/2)

	def testOffsetAlongEquator(self):
		pos, bearing = sphermath.getGCOffset((0, 0), math.pi/2, 0.3)
		self.assertAlmostEqualVector(pos, (0.3, 0))
		self.assertAlmostEqual(bearing, math.pi/2)

	def testOffsetWraps(self):
		pos, _ = sphermath.getGCOffset((0.1, 0), -math.pi/2, 0.3)
		self.assertAlmostEqualVector(pos, (2*math.pi-0.2, 0))

	def testIntersection(self):
		pos = sphermath.getGCIntersection((0, 0), (1, 0), (0.5, -0.5), (0.5, 0.5))
		self.assertAlmostEqualVector(pos, (0.5, 0))

	def testNoIntersection(self):
		self.assertEqual(sphermath.getGCIntersection(
			(0, 0), (1, 0), (0.2, 0), (0.4, 0)), None)


class BasicFrameTest(testhelpers.VerboseTest):
	def testUnits(self):
		frame = frames.BasicFrame(3, "m")
		self.assertEqual(frame.units, ["m", "m", "m"])
		frame.setUnit(1, "km")
		self.assertEqual(frame.getUnit(1), "km")

	def testBadUnitCount(self):
		self.assertRaisesWithMsg(common.STCValueError,
			"2 units given for a frame with 3 axes",
			frames.BasicFrame, (3, ["m", "m"]))

	def testGeodesics(self):
		frame = frames.BasicFrame(2)
		self.assertAlmostEqual(frame.distance((0, 0), (3, 4)), 5)
		self.assertAlmostEqualVector(frame.offset((0, 0), (3, 4), 2.5),
			(1.5, 2))
		pos, angle = frame.offset2((1, 1), math.pi/2, 2)
		self.assertAlmostEqualVector(pos, (3, 1))
		self.assertEqual(angle, math.pi/2)

	def testIntersect(self):
		frame = frames.BasicFrame(2)
		self.assertAlmostEqualVector(
			frame.intersect((0, 0), (1, 1), (0, 2), (2, 0)), (1, 1))
		self.assertEqual(frame.intersect((0, 0), (1, 1), (0, 1), (1, 2)), None)

	def testPickAxes(self):
		frame = frames.BasicFrame(3, ["m", "km", "pc"], domain="GEO")
		picked = frame.pickAxes([0, 2])
		self.assertEqual(picked.units, ["m", "pc"])
		self.assertEqual(picked.domain, "GEO")
		self.assertTrue(frame.pickAxes([0, 1, 2]) is frame)


class SkyFrameTest(testhelpers.VerboseTest):
	def testDefaultEquinoxes(self):
		self.assertEqual(frames.SkyFrame("FK4").equinox, 1950.0)
		self.assertEqual(frames.SkyFrame("ICRS").equinox, None)
		self.assertEqual(frames.SkyFrame("FK5", equinox=2010.).equinox, 2010.)

	def testSystemChangeResetsEquinox(self):
		frame = frames.SkyFrame("ICRS")
		frame.system = "FK5"
		self.assertEqual(frame.equinox, 2000.0)

	def testAxDistanceWraps(self):
		frame = frames.SkyFrame()
		self.assertAlmostEqual(frame.axDistance(0, 359*toRad, 1*toRad),
			2*toRad)
		self.assertAlmostEqual(frame.axDistance(1, 10*toRad, 5*toRad),
			-5*toRad)

	def testDistance(self):
		frame = frames.SkyFrame()
		self.assertAlmostEqual(frame.distance((0, 0), (0, 0.5)), 0.5)

	def testKind(self):
		self.assertEqual(frames.SkyFrame().kind, "sky")


class OneDFrameTest(testhelpers.VerboseTest):
	def testTimeToMJD(self):
		frame = frames.TimeFrame(timeOrigin=50000.)
		self.assertEqual(frame.toMJD(0.5), 50000.5)
		frame.system = "JD"
		self.assertEqual(frame.toMJD(2400000.5), 50000.)

	def testSpecKinds(self):
		self.assertEqual(frames.SpecFrame().kind, "spectral")
		self.assertEqual(frames.SpecFrame(domain="REDSHIFT").kind, "redshift")


class CmpFrameTest(testhelpers.VerboseTest):
	def _makeFrame(self):
		return frames.CmpFrame([frames.TimeFrame(), frames.SkyFrame(),
			frames.SpecFrame()])

	def testAxes(self):
		frame = self._makeFrame()
		self.assertEqual(frame.naxes, 4)
		pFrame, axis = frame.getPrimaryFrame(2)
		self.assertEqual(pFrame.kind, "sky")
		self.assertEqual(axis, 1)
		self.assertEqual(frame.getUnit(3), "Hz")

	def testBadAxis(self):
		self.assertRaisesWithMsg(common.STCValueError,
			"Axis 4 does not exist in a 4-axis frame",
			self._makeFrame().getPrimaryFrame, (4,))

	def testPickSingle(self):
		frame = self._makeFrame()
		self.assertTrue(frame.pickAxes([1, 2]) is frame.frames[1])

	def testPickMixed(self):
		picked = self._makeFrame().pickAxes([0, 3])
		self.assertEqual([f.kind for f in picked.frames], ["time", "spectral"])


if __name__=="__main__":
	testhelpers.main(SphermathTest)
