# Copyright (c) 2008 Michael Gold
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

r"""
mpegheader: decode MPEG audio (versions 1 and 2, layers I-III) frame headers
and compute the sample rate, bitrate and size of each frame.

  >>> from mpegheader import parse_header
  >>> head = parse_header(b'\xff\xfa\x90\x0c')
  >>> head.bitrate, head.sample_rate, head.frame_size
  (128, 44100, 417)
"""

from .errors import (MP3Error, MP3DataError, MP3UsageError,
		MP3ImplementationLimit, HeaderError, TooShort, InvalidSync,
		InvalidVersion, InvalidLayer, InvalidSampleRateIndex,
		InvalidBitrateIndex)
from .mp3bits import Version, Layer, ChannelMode
from .frames import FrameHeader, parse_header, probe_header, check_header
from .sync import Frame, FrameScanner

__version__ = '0.1.0'
