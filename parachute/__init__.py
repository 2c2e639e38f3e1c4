"""Parachute -- circular binary message rings.

Encodes short text messages as binary digit strings and renders them
as concentric ring-arcs, in the style of the message hidden in the
Perseverance rover's descent parachute ("dare mighty things").

Each ring carries one message. Every character becomes a fixed-width
block of binary digits plus a little padding, the blocks can be
rotated around the ring, and every run of 1s is drawn as one filled
wedge.
"""
