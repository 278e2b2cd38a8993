"""
Test the worked example classes.
"""

import pytest

from classbuilder import PrivateAccessViolation, StaticAccessViolation
from classbuilder.examples import build_cake_class, build_math_class


def test_math_add_without_instance():
    Math = build_math_class()
    assert Math.add(7, 3) == 10


def test_cake_is_cooked(capsys):
    Cake = build_cake_class()
    assert Cake.new().isCooked() is True
    assert capsys.readouterr().out == "Cooked!\n"


def test_cake_private_temperature():
    Cake = build_cake_class()
    with pytest.raises(PrivateAccessViolation):
        Cake.new().getTemperature()


def test_cake_bake_changes_one_instance(capsys):
    Cake = build_cake_class(temp=100)
    cold = Cake.new()
    hot = Cake.new()
    hot.bake(260)
    assert hot.isCooked() is True
    assert cold.isCooked() is False
    assert capsys.readouterr().out == "Cooked!\n"


def test_cake_is_cooked_needs_instance():
    Cake = build_cake_class()
    with pytest.raises(StaticAccessViolation):
        Cake.isCooked()
