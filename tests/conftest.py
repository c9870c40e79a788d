"""Pytest configuration and fixtures for clanker-predictor tests."""

import subprocess
import time
from contextlib import asynccontextmanager

import pytest
from eth_utils import to_checksum_address
from web3 import AsyncWeb3

from clanker_predictor import TokenConfig
from clanker_predictor.creation_code import _load

# Anvil's pre-funded test accounts (same as Hardhat/Foundry)
# Private keys are well-known - DO NOT use on mainnet
ANVIL_ACCOUNTS = [
    {
        "address": "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
        "private_key": "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80",
    },
]

BASE_FACTORY = to_checksum_address("0xe85a59c628f7d27878aceb4bf3b35733630083a9")

# Stand-in for the token creation code: copies SAMPLE_RUNTIME_CODE (returns 42)
# into memory and returns it. Constructor args appended after it are ignored.
SAMPLE_RUNTIME_CODE = bytes.fromhex("602a60005260206000f3")
SAMPLE_CREATION_CODE = bytes.fromhex("600a600c600039600a6000f3") + SAMPLE_RUNTIME_CODE

HULLO_ADMIN = "0x052DCF6cB9dDD12C3F1350344CF6cE64E61bCd38"


def _wait_for_anvil(url: str, timeout: float = 10.0) -> bool:
    """Wait for Anvil to be ready."""
    import socket
    from urllib.parse import urlparse

    parsed = urlparse(url)
    host = parsed.hostname or "localhost"
    port = parsed.port or 8545

    start = time.time()
    while time.time() - start < timeout:
        try:
            with socket.create_connection((host, port), timeout=1):
                return True
        except OSError:
            time.sleep(0.1)
    return False


@pytest.fixture(scope="session")
def anvil_fork():
    """
    Spin up Anvil forking Base mainnet for integration tests.

    Requires Foundry to be installed: https://getfoundry.sh

    The fork gives us the already-deployed Clanker factory and a node that
    serves debug_traceTransaction.
    """
    rpc_url = "http://localhost:8545"

    # Check if Anvil is available
    try:
        subprocess.run(["anvil", "--version"], capture_output=True, check=True)
    except (subprocess.CalledProcessError, FileNotFoundError):
        pytest.skip("Anvil not installed. Run: curl -L https://foundry.paradigm.xyz | bash")

    proc = subprocess.Popen(
        [
            "anvil",
            "--fork-url",
            "https://mainnet.base.org",
            "--port",
            "8545",
            "--silent",
        ],
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )

    if not _wait_for_anvil(rpc_url):
        proc.terminate()
        pytest.fail("Anvil failed to start")

    yield rpc_url

    proc.terminate()
    proc.wait(timeout=5)


@pytest.fixture
def hullo_config() -> TokenConfig:
    """The configuration of the 'hullo' token."""
    return TokenConfig(
        token_admin=HULLO_ADMIN,
        name="hullo",
        symbol="hullo",
        salt="0x000000000000000000000000000000005e95d213a71de2a3918637b124818091",
        originating_chain_id=1,
    )


@pytest.fixture
def sample_code() -> bytes:
    return SAMPLE_CREATION_CODE


@pytest.fixture
def embedded_code(monkeypatch):
    """
    Replace the embedded creation code resource.

    Returns a setter; the lru_cache is cleared around each use.
    """

    def _set(text: str) -> None:
        monkeypatch.setattr("clanker_predictor.creation_code._read_resource", lambda: text)
        _load.cache_clear()

    yield _set
    _load.cache_clear()


@asynccontextmanager
async def async_w3(rpc_url: str):
    """Context manager for AsyncWeb3 that properly closes the session."""
    w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))
    try:
        yield w3
    finally:
        await w3.provider.disconnect()
