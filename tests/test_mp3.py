import pytest

from formatreaders.mp3 import (
    Mp3Error,
    Mp3File,
    bitrate_for,
    main,
    open_mp3,
    parse_header,
    sample_rate_for,
)

MPEG1_LAYER3 = bytes([0xFF, 0xFB, 0x90, 0x64])


def test_bitrate_table_values():
    assert bitrate_for(1, 3, 9) == 128000
    assert bitrate_for(1, 1, 14) == 448000
    assert bitrate_for(2, 2, 14) == 256000


def test_bitrate_invalid_combinations():
    assert bitrate_for(1, 3, 0) is None
    assert bitrate_for(1, 3, 15) is None
    assert bitrate_for(0, 3, 5) is None
    assert bitrate_for(1, 0, 5) is None
    assert bitrate_for(1, 3, 16) is None


def test_sample_rate_tables():
    assert sample_rate_for(1, 0) == 44100
    assert sample_rate_for(2, 1) == 24000
    assert sample_rate_for(3, 2) == 8000
    assert sample_rate_for(1, 3) is None
    assert sample_rate_for(1, 4) is None


def test_parse_mpeg1_layer3_header():
    header = parse_header(MPEG1_LAYER3)
    assert header.version == 1
    assert header.layer == 3
    assert header.bitrate == bitrate_for(1, 3, 9)
    assert header.sample_rate == sample_rate_for(1, 0)
    assert header.protection_bit is False
    assert header.channel_mode_name() == "Joint Stereo (Stereo)"


def test_parse_mpeg2_header():
    header = parse_header(bytes([0xFF, 0xF3, 0x10, 0x00]))
    assert header.version == 2
    assert header.layer == 3
    assert header.sample_rate == sample_rate_for(2, 0)
    assert header.bitrate == bitrate_for(2, 3, 1)


def test_mono_channel_mode():
    header = parse_header(bytes([0xFF, 0xFB, 0x90, 0xC0]))
    assert header.channel_mode == 3
    assert header.channel_mode_name() == "Mono"


def test_extra_bytes_are_ignored():
    assert parse_header(MPEG1_LAYER3 + b"\x00" * 10) == parse_header(MPEG1_LAYER3)


def test_short_input_raises():
    with pytest.raises(Mp3Error):
        parse_header(b"\xff\xfb")


def test_bad_sync_word_raises():
    with pytest.raises(Mp3Error, match="senkronizasyon"):
        parse_header(bytes([0xFE, 0xFB, 0x90, 0x64]))
    with pytest.raises(Mp3Error):
        parse_header(bytes([0xFF, 0x1B, 0x90, 0x64]))


@pytest.mark.parametrize(
    "data",
    [
        bytes([0xFF, 0xEB, 0x90, 0x64]),  # reserved version
        bytes([0xFF, 0xF9, 0x90, 0x64]),  # reserved layer
        bytes([0xFF, 0xFB, 0xF0, 0x64]),  # bad bitrate index
    ],
)
def test_invalid_bitrate_raises(data):
    with pytest.raises(Mp3Error, match="Bit Hızı"):
        parse_header(data)


def test_reserved_sample_rate_raises():
    with pytest.raises(Mp3Error, match="Örnekleme"):
        parse_header(bytes([0xFF, 0xFB, 0x9C, 0x64]))


def test_describe_mentions_fields():
    text = parse_header(MPEG1_LAYER3).describe()
    assert "MPEG 1" in text
    assert "Layer 3" in text
    assert "44100 Hz" in text


def test_open_mp3_reads_file(tmp_path):
    path = tmp_path / "a.mp3"
    path.write_bytes(MPEG1_LAYER3 + b"\x00" * 100)
    mp3 = open_mp3(path)
    assert isinstance(mp3, Mp3File)
    assert mp3.path == str(path)
    assert mp3.header == parse_header(MPEG1_LAYER3)


def test_open_mp3_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_mp3(tmp_path / "missing.mp3")


def test_main_prints_header(tmp_path, capsys):
    path = tmp_path / "a.mp3"
    path.write_bytes(MPEG1_LAYER3)
    assert main([str(path)]) == 0
    assert "MPEG 1" in capsys.readouterr().out


def test_main_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.mp3"
    path.write_bytes(b"\x00\x00\x00\x00")
    assert main([str(path)]) == 1
    assert "Hata" in capsys.readouterr().err