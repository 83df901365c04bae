from pathlib import Path


# ------------------------------------------------------------------
# Known digests (precomputed with coreutils sha256sum)
# ------------------------------------------------------------------

HELLO_DIGEST = (
    "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
)

# "π" is U+03C0, UTF-8 bytes cf 80
PI_DIGEST = (
    "2617fcb92baa83a96341de050f07a3186657090881eae6b833f66a035600f35a"
)

HELLO_WORLD_LINE_DIGEST = (
    "a948904f2f0f479b8f8197694b30184b0d2ed1c1cd2a1ec0fb85d299a192a447"
)

# 1024 and 1025 repetitions of b"a"
A_1024_DIGEST = (
    "2edc986847e209b4016e141a6dc8716d3207350f416969382d431539bf292e4a"
)
A_1025_DIGEST = (
    "4a82297889eb505cf6b5cbdf69977afab4632d6557539782f657bd7dc78091a5"
)

# bytes(v % 256 for v in range(0x1000))
RAMP_4K_DIGEST = (
    "c8f5d0341d54d951a71b136e6e2afcb14d11ed8489a7ae126a8fee0df6ecf193"
)

# bytes(range(256)) * 16384, 4 MiB
LARGE_FILE_SIZE = 4 * 1024 * 1024
LARGE_FILE_DIGEST = (
    "2b07811057df887086f06a67edc6ebf911de8b6741156e7a2eb1416a4b8b1b2e"
)


# ------------------------------------------------------------------
# Factories
# ------------------------------------------------------------------

def ramp_bytes(length: int) -> bytes:
    """Deterministic byte pattern 00 01 .. ff 00 01 .. of ``length`` bytes."""
    return bytes(v % 256 for v in range(length))


def write_file(directory: Path, name: str, data: bytes) -> Path:
    path = directory / name
    path.write_bytes(data)
    return path


def large_file(directory: Path) -> Path:
    """
    Write the 4 MiB fixture used for multi-chunk streaming tests.

    At the default chunk size this is 4096 sequential reads.
    """
    return write_file(
        directory,
        "large.bin",
        bytes(range(256)) * (LARGE_FILE_SIZE // 256),
    )
