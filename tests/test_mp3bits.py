import pytest

from mpegheader import mp3bits
from mpegheader.mp3bits import Version, Layer


VERSIONS = (Version.MPEG1, Version.MPEG2, Version.MPEG2_5)
LAYERS = (Layer.LAYER_I, Layer.LAYER_II, Layer.LAYER_III)


@pytest.mark.parametrize("version, expected", [
	(Version.MPEG1, (44100, 48000, 32000)),
	(Version.MPEG2, (22050, 24000, 16000)),
	(Version.MPEG2_5, (11025, 12000, 8000)),
])
def test_samplerate_table(version, expected):
	assert tuple(mp3bits.samplerate(version, i) for i in range(3)) == expected
	assert mp3bits.samplerate(version, 3) is None


def test_samplerate_unavailable():
	assert mp3bits.samplerate(Version.RESERVED, 0) is None
	assert mp3bits.samplerate(4, 0) is None
	assert mp3bits.samplerate(Version.MPEG1, -1) is None


def test_bitrate_mpeg1_columns():
	v1 = Version.MPEG1
	assert [mp3bits.bitrate(v1, Layer.LAYER_III, i) for i in range(1, 15)] == [
			32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320]
	assert [mp3bits.bitrate(v1, Layer.LAYER_II, i) for i in range(1, 15)] == [
			32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384]
	assert [mp3bits.bitrate(v1, Layer.LAYER_I, i) for i in range(1, 15)] == [
			32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448]


def test_bitrate_mpeg2_table_is_shared_with_mpeg2_5():
	for layer in LAYERS:
		for idx in range(1, 15):
			assert (mp3bits.bitrate(Version.MPEG2, layer, idx)
					== mp3bits.bitrate(Version.MPEG2_5, layer, idx))
	
	v2 = Version.MPEG2
	assert mp3bits.bitrate(v2, Layer.LAYER_III, 1) == 8
	assert mp3bits.bitrate(v2, Layer.LAYER_II, 14) == 160
	assert mp3bits.bitrate(v2, Layer.LAYER_I, 14) == 256


@pytest.mark.parametrize("args", [
	(Version.MPEG1, Layer.LAYER_III, 0),   # free format
	(Version.MPEG1, Layer.LAYER_III, 15),  # reserved
	(Version.MPEG1, Layer.LAYER_III, 16),
	(Version.MPEG1, Layer.RESERVED, 5),
	(Version.RESERVED, Layer.LAYER_III, 5),
	(-1, Layer.LAYER_III, 5),
	(Version.MPEG1, 7, 5),
])
def test_bitrate_unavailable(args):
	assert mp3bits.bitrate(*args) is None


@pytest.mark.parametrize("version", VERSIONS)
@pytest.mark.parametrize("layer", LAYERS)
def test_bitrate_increases_with_index(version, layer):
	rates = [mp3bits.bitrate(version, layer, i) for i in range(1, 15)]
	assert all(a < b for (a, b) in zip(rates, rates[1:]))


@pytest.mark.parametrize("version", (Version.MPEG1, Version.MPEG2))
@pytest.mark.parametrize("layer", LAYERS)
@pytest.mark.parametrize("sr_index", (0, 1, 2))
def test_frame_size_non_decreasing_with_bitrate(version, layer, sr_index):
	sizes = [mp3bits.frame_size(version, layer, i, sr_index, 0)
			for i in range(1, 15)]
	assert None not in sizes
	assert sizes == sorted(sizes)


def test_frame_size_layer_formulas():
	# 144 * 128000 / 44100 = 417.96
	assert mp3bits.frame_size(Version.MPEG1, Layer.LAYER_III, 9, 0, 0) == 417
	assert mp3bits.frame_size(Version.MPEG1, Layer.LAYER_III, 9, 0, 1) == 418
	# 48 * 32000 / 44100 = 34.83; padding adds one byte in layer I too
	assert mp3bits.frame_size(Version.MPEG1, Layer.LAYER_I, 1, 0, 0) == 34
	assert mp3bits.frame_size(Version.MPEG1, Layer.LAYER_I, 1, 0, 1) == 35
	assert mp3bits.frame_size(Version.MPEG1, Layer.LAYER_I, 12, 1, 0) == 384
	# 144 * 32000 / 24000 = 192
	assert mp3bits.frame_size(Version.MPEG2, Layer.LAYER_II, 4, 1, 0) == 192
	assert mp3bits.frame_size(Version.MPEG2, Layer.LAYER_III, 1, 0, 0) == 52


def test_frame_size_unavailable():
	assert mp3bits.frame_size(Version.MPEG1, Layer.RESERVED, 9, 0, 0) is None
	assert mp3bits.frame_size(Version.MPEG1, Layer.LAYER_III, 0, 0, 0) is None
	assert mp3bits.frame_size(Version.MPEG1, Layer.LAYER_III, 9, 3, 0) is None
	assert mp3bits.frame_size(Version.RESERVED, Layer.LAYER_III, 9, 0, 0) is None


def test_samples_per_frame():
	assert mp3bits.samples_per_frame(Version.MPEG1, Layer.LAYER_I) == 384
	assert mp3bits.samples_per_frame(Version.MPEG1, Layer.LAYER_II) == 1152
	assert mp3bits.samples_per_frame(Version.MPEG1, Layer.LAYER_III) == 1152
	assert mp3bits.samples_per_frame(Version.MPEG2, Layer.LAYER_III) == 576
	assert mp3bits.samples_per_frame(Version.MPEG2_5, Layer.LAYER_II) == 1152
	assert mp3bits.samples_per_frame(Version.RESERVED, Layer.LAYER_II) is None
	assert mp3bits.samples_per_frame(Version.MPEG1, Layer.RESERVED) is None


def test_enum_names():
	assert str(Version.MPEG2_5) == 'MPEG 2.5'
	assert str(Layer.LAYER_II) == 'Layer II'
	assert str(mp3bits.ChannelMode.DUAL_CHANNEL) == 'Dual Channel'
