"""
Code to support users of the STC-S codec that is not needed for reading
and writing STC-S itself (right now, test support).
"""

#c Copyright 2009 the GAVO Project.
#c
#c This program is free software, covered by the GNU GPL.  See COPYING.
