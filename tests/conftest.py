import pytest

# BIP-39 vector for 16 zero bytes of entropy
ZERO_ENTROPY = bytes(16)
ZERO_PHRASE = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)

# SEP-0005 test vector 1
SEP5_PHRASE = "illness spike retreat truth genius clock brain pass fit cave bargain toe"


def pytest_addoption(parser):
    parser.addoption(
        "--all", action="store_true", help="run all tests, including slow ones"
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--all"):
        skip_slow = pytest.mark.skip(reason="need --all option to run")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture
def zero_phrase():
    return ZERO_PHRASE


@pytest.fixture
def sep5_phrase():
    return SEP5_PHRASE
