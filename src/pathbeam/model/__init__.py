"""
The MODEL layer contains the 2D geometry the beam computation works on.
It has NO knowledge of beams; it deals with paths, model trees,
intersections and measurement.
"""
