"""Reading the header of the first MPEG audio frame in an MP3 file."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "Mp3Error",
    "Mp3Header",
    "Mp3File",
    "bitrate_for",
    "sample_rate_for",
    "parse_header",
    "open_mp3",
    "main",
]

HEADER_SIZE = 4

_BITRATES_MPEG1_LAYER1 = (
    None, 32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448, None,
)
_BITRATES_MPEG1_LAYER2 = (
    None, 32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384, None,
)
_BITRATES_MPEG1_LAYER3 = (
    None, 32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, None,
)
_BITRATES_MPEG2 = (
    None, 32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256, None,
)

_BITRATE_TABLES = {
    (1, 1): _BITRATES_MPEG1_LAYER1,
    (1, 2): _BITRATES_MPEG1_LAYER2,
    (1, 3): _BITRATES_MPEG1_LAYER3,
    (2, 1): _BITRATES_MPEG2,
    (2, 2): _BITRATES_MPEG2,
    (2, 3): _BITRATES_MPEG2,
}

_SAMPLE_RATES_MPEG1 = (44100, 48000, 32000, None)
_SAMPLE_RATES_MPEG2 = (22050, 24000, 16000, None)
_SAMPLE_RATES_MPEG25 = (11025, 12000, 8000, None)

# Version bits 00 (MPEG 2.5) are reported as version 2; 01 is reserved.
_VERSIONS = {0b00: 2, 0b01: 0, 0b10: 2, 0b11: 1}
_LAYERS = {0b00: 0, 0b01: 3, 0b10: 2, 0b11: 1}

_CHANNEL_MODES = {
    0: "Stereo",
    1: "Joint Stereo (Stereo)",
    2: "Dual Channel (İki Kanal)",
    3: "Mono",
}


class Mp3Error(ValueError):
    """Raised when an MP3 frame header cannot be read or is invalid."""


def bitrate_for(version: int, layer: int, index: int) -> int | None:
    """Return the bitrate in bits per second, or None for an invalid combination."""
    table = _BITRATE_TABLES.get((version, layer))
    if table is None or not 0 <= index < len(table):
        return None
    kbps = table[index]
    return None if kbps is None else kbps * 1000


def sample_rate_for(version: int, index: int) -> int | None:
    """Return the sample rate in Hz, or None for a reserved index."""
    if version == 1:
        table = _SAMPLE_RATES_MPEG1
    elif version == 2:
        table = _SAMPLE_RATES_MPEG2
    else:
        table = _SAMPLE_RATES_MPEG25
    if not 0 <= index < len(table):
        return None
    return table[index]


@dataclass(frozen=True)
class Mp3Header:
    """Fields decoded from a four-byte MPEG audio frame header."""

    version: int
    layer: int
    protection_bit: bool
    bitrate: int
    sample_rate: int
    padding_bit: bool
    private_bit: bool
    channel_mode: int
    mode_extension: int
    copyright: bool
    original_home: bool

    def channel_mode_name(self) -> str:
        """Human-readable name of the channel mode."""
        return _CHANNEL_MODES.get(self.channel_mode, "Bilinmiyor")

    def describe(self) -> str:
        """Multi-line summary of the header."""

        def flag(value: bool, yes: str = "Var", no: str = "Yok") -> str:
            return yes if value else no

        lines = [
            "MP3 Başlık Bilgileri:",
            f"  Versiyon: MPEG {self.version}",
            f"  Katman: Layer {self.layer}",
            f"  Koruma biti: {flag(self.protection_bit, 'Yok (CRC)', 'Var (CRC)')}",
            f"  Bit Hızı: {self.bitrate // 1000} kbps",
            f"  Örnekleme Hızı: {self.sample_rate} Hz",
            f"  Dolgu Biti: {flag(self.padding_bit)}",
            f"  Özel Bit: {flag(self.private_bit)}",
            f"  Kanal Modu: {self.channel_mode_name()}",
            f"  Mod Uzantısı: {self.mode_extension}",
            f"  Telif Hakkı: {flag(self.copyright)}",
            f"  Orijinal/Ev Yapımı: {flag(self.original_home, 'Orijinal', 'Ev Yapımı')}",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class Mp3File:
    """An MP3 file together with the header of its first frame."""

    path: str
    header: Mp3Header


def parse_header(data: bytes) -> Mp3Header:
    """Decode the frame header held in the first four bytes of ``data``."""
    if len(data) < HEADER_SIZE:
        raise Mp3Error("unexpected end of file")
    b0, b1, b2, b3 = data[:HEADER_SIZE]

    if b0 != 0xFF or (b1 & 0xE0) != 0xE0:
        raise Mp3Error("Geçersiz MP3 senkronizasyon kelimesi")

    version = _VERSIONS[(b1 >> 3) & 0x03]
    layer = _LAYERS[(b1 >> 1) & 0x03]
    bitrate_index = (b2 >> 4) & 0x0F
    sample_rate_index = (b2 >> 2) & 0x03

    bitrate = bitrate_for(version, layer, bitrate_index)
    if bitrate is None:
        raise Mp3Error("Geçersiz Bit Hızı İndeksi")
    sample_rate = sample_rate_for(version, sample_rate_index)
    if sample_rate is None:
        raise Mp3Error("Geçersiz Örnekleme Hızı İndeksi")

    return Mp3Header(
        version=version,
        layer=layer,
        protection_bit=(b1 & 0x01) == 0,
        bitrate=bitrate,
        sample_rate=sample_rate,
        padding_bit=bool((b2 >> 1) & 0x01),
        private_bit=bool(b2 & 0x01),
        channel_mode=(b3 >> 6) & 0x03,
        mode_extension=(b3 >> 4) & 0x03,
        copyright=bool((b3 >> 3) & 0x01),
        original_home=bool((b3 >> 2) & 0x01),
    )


def open_mp3(path: str | Path) -> Mp3File:
    """Open ``path`` and decode the header at its start."""
    with open(path, "rb") as stream:
        data = stream.read(HEADER_SIZE)
    return Mp3File(path=str(path), header=parse_header(data))


def main(argv: list[str] | None = None) -> int:
    """Print the frame header of an MP3 file."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "example.mp3"
    try:
        mp3 = open_mp3(path)
    except (OSError, Mp3Error) as exc:
        print(f"Hata: {exc}", file=sys.stderr)
        return 1
    print(mp3.header.describe())
    return 0