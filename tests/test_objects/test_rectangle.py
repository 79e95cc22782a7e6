"""Tests for the rectangle factory."""

from selectorkit.objects import Rectangle, make_rectangle


class TestMakeRectangle:
    def test_fields(self):
        r = make_rectangle(10, 20)
        assert isinstance(r, Rectangle)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert make_rectangle(10, 20).get_area() == 200

    def test_area_tracks_mutation(self):
        r = make_rectangle(10, 20)
        r.width = 5
        assert r.get_area() == 100
        r.height = 2.5
        assert r.get_area() == 12.5

    def test_zero_side(self):
        assert make_rectangle(0, 7).get_area() == 0

    def test_instances_independent(self):
        a = make_rectangle(1, 2)
        b = make_rectangle(1, 2)
        a.width = 3
        assert b.get_area() == 2
