# Copyright (c) 2005,2008 Michael Gold
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""\
Constants, lookup tables and utility functions for working with MPEG audio
header fields.  The functions here take raw field values (the integers
stored in the header bits) rather than FrameHeader objects, and return None
for any combination that has no defined value; they never raise."""

import enum
import math


# MPEG audio header:
# AAAAAAAA AAABBCCD EEEEFFGH IIJJKLMM
#
# (based on information from
# http://www.mp3-tech.org/programmer/frame_header.html)
#
# A 11 (21-31) Sync (all bits 1)
# B  2 (19-20) MPEG version (11=V1, 10=V2, 01=res, 00=V2.5)
# C  2 (17-18) Layer (11=L1, 10=L2, 01=L3, 00=res)
# D  1 (16)    ~CRC (0=protected)
# E  4 (12-15) Bitrate index (0000=free, 1111=bad)
# F  2 (10-11) Sampling rate index (11=res)
# G  1 (9)     Padding
# H  1 (8)     Private
# I  2 (6-7)   Channel mode (00=stereo, 01=joint, 10=dual, 11=mono)
# J  2 (4-5)   Mode ext. (joint stereo only)
#  j1 1 (5)    Mid/side stereo (layer 3)
#  j2 1 (4)    Intensity stereo (layer 3)
# K  1 (3)     Copyright
# L  1 (2)     Original
# M  2 (0-1)   Emphasis (00=none, 01=50/15 ms, 10=res, 11=CCIT J.17)

SYNC_WORD = 0x7ff
HEADER_SIZE = 4


class Version(enum.IntEnum):
	MPEG2_5 = 0  # unofficial extension
	RESERVED = 1
	MPEG2 = 2
	MPEG1 = 3
	
	def __str__(self):
		return _version_names[self]

_version_names = ('MPEG 2.5', 'Reserved', 'MPEG 2', 'MPEG 1')


class Layer(enum.IntEnum):
	RESERVED = 0
	LAYER_III = 1
	LAYER_II = 2
	LAYER_I = 3
	
	def __str__(self):
		return _layer_names[self]

_layer_names = ('Reserved', 'Layer III', 'Layer II', 'Layer I')


class ChannelMode(enum.IntEnum):
	STEREO = 0
	JOINT_STEREO = 1
	DUAL_CHANNEL = 2
	MONO = 3
	
	def __str__(self):
		return _channel_mode_names[self]

_channel_mode_names = ('Stereo', 'Joint Stereo (Intensity Stereo/MS Stereo)',
		'Dual Channel', 'Mono')


# bitrates in kbps; each row is (L3, L2, L1) so that the column
# is layer_index - 1
_br_v1 = (
	None,             # E = 0000 (free format)
	( 32,  32,  32),  # E = 0001
	( 40,  48,  64),  # E = 0010
	( 48,  56,  96),  # E = 0011
	( 56,  64, 128),  # E = 0100
	( 64,  80, 160),  # E = 0101
	( 80,  96, 192),  # E = 0110
	( 96, 112, 224),  # E = 0111
	(112, 128, 256),  # E = 1000
	(128, 160, 288),  # E = 1001
	(160, 192, 320),  # E = 1010
	(192, 224, 352),  # E = 1011
	(224, 256, 384),  # E = 1100
	(256, 320, 416),  # E = 1101
	(320, 384, 448),  # E = 1110
	None,             # E = 1111 (bad)
)
_br_v2 = (
	None,
	(  8,   8,  32),
	( 16,  16,  48),
	( 24,  24,  56),
	( 32,  32,  64),
	( 40,  40,  80),
	( 48,  48,  96),
	( 56,  56, 112),
	( 64,  64, 128),
	( 80,  80, 144),
	( 96,  96, 160),
	(112, 112, 176),
	(128, 128, 192),
	(144, 144, 224),
	(160, 160, 256),
	None,
)

_br_tables = (  # indexed by B (version)
	_br_v2,  # B=00 (V2.5)
	None,    # B=01 (reserved)
	_br_v2,  # B=10 (V2)
	_br_v1,  # B=11 (V1)
)

_sr_table = (  # indexed by B,F (version,samplerate)
	( 11025, 12000,  8000, None ),
	(  None,  None,  None, None ),
	( 22050, 24000, 16000, None ),
	( 44100, 48000, 32000, None ),
)

# samples per frame
_spf_table = (  # indexed by B,C (version,layer)
	( None,  576, 1152,  384 ),  # B = 00 (V2.5)
	( None, None, None, None ),  # B = 01 (reserved)
	( None,  576, 1152,  384 ),  # B = 10 (V2)
	( None, 1152, 1152,  384 ),  # B = 11 (V1)
)

# bytes per slot times slots per frame, over the bitrate in bps
_size_mult = ( None, 144.0, 144.0, 48.0 )  # indexed by C (layer)


def _in_range(val, count):
	return isinstance(val, int) and 0 <= val < count


def samplerate(version_index, samplerate_index):
	"""samplerate(version_index, samplerate_index) -> int or None

Return the number of audio samples per second (per channel), in Hz."""
	
	if not (_in_range(version_index, 4) and _in_range(samplerate_index, 4)):
		return None
	return _sr_table[version_index][samplerate_index]


def bitrate(version_index, layer_index, bitrate_index):
	"""bitrate(version_index, layer_index, bitrate_index) -> int or None

Return the bitrate, in kbps; or None for a free format, reserved or
out-of-range combination."""
	
	if not (_in_range(version_index, 4) and _in_range(layer_index, 4)
			and _in_range(bitrate_index, 16)):
		return None
	if layer_index == Layer.RESERVED:
		return None
	
	table = _br_tables[version_index]
	if table is None: return None
	
	row = table[bitrate_index]
	if row is None: return None
	return row[layer_index - 1]


def samples_per_frame(version_index, layer_index):
	"""samples_per_frame(version_index, layer_index) -> int or None

Return the number of audio samples in each frame."""
	
	if not (_in_range(version_index, 4) and _in_range(layer_index, 4)):
		return None
	return _spf_table[version_index][layer_index]


def frame_size(version_index, layer_index,
		bitrate_index, samplerate_index, padding):
	"""frame_size(version_index, layer_index, bitrate_index,
           samplerate_index, padding) -> int or None

Return the size of a frame, in bytes (header included); or None if the
bitrate or samplerate is unknown.

Layer I uses 48 * bitrate / samplerate and layers II and III use
144 * bitrate / samplerate; the padding bit adds a single byte for every
layer."""
	
	br = bitrate(version_index, layer_index, bitrate_index)
	sr = samplerate(version_index, samplerate_index)
	if br is None or sr is None:
		return None
	
	mult = _size_mult[layer_index]
	if mult is None: return None
	
	bps = br * 1000.0
	return int(math.floor(mult * bps / sr)) + (1 if padding else 0)
