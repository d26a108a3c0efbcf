import pytest


class OnlyAdd:
    """Defines `+` and nothing else."""
    def __init__(self, val=0):
        self.val = val

    def __add__(self, other):
        return OnlyAdd(self.val + other.val)


class OnlyOrder:
    """Defines `<` and `>` and nothing else."""
    def __init__(self, val=0):
        self.val = val

    def __lt__(self, other):
        return self.val < other.val

    def __gt__(self, other):
        return self.val > other.val


class Opaque:
    """Defines no operators at all."""
    def __init__(self, val=0):
        self.val = val


@pytest.fixture
def only_add():
    return OnlyAdd


@pytest.fixture
def only_order():
    return OnlyOrder


@pytest.fixture
def opaque():
    return Opaque
