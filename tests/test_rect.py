import math

import pytest

from flow.glm.matrix import Mat4
from flow.glm.rect import Box, Rect, cr, r
from flow.glm.vec import Vec2, Vec3, v2


def approx_vec2(a, b):
    return a.x == pytest.approx(b.x) and a.y == pytest.approx(b.y)


def test_corners_and_size():
    rect = r(1, 2, 7, 9)
    assert rect.tl() == Vec2(1, 9)
    assert rect.br() == Vec2(7, 2)
    assert rect.size() == Vec2(rect.w(), rect.h())
    assert rect.box() == Box(Vec3(1, 2, 0), Vec3(7, 9, 0))
    assert rect.box().rect() == rect


def test_cr_is_centered_on_origin():
    rect = cr(3)
    assert rect.center() == Vec2(0, 0)
    assert rect.min == Vec2(-3, -3)
    assert rect.max == Vec2(3, 3)


def test_with_center_keeps_size():
    rect = r(0, 0, 4, 6)
    moved = rect.with_center(v2(10, 20))
    assert moved.center() == v2(10, 20)
    assert moved.w() == rect.w()
    assert moved.h() == rect.h()


def test_norm_orders_corners():
    rect = r(5, 8, 1, 2)
    norm = rect.norm()
    assert norm == r(1, 2, 5, 8)
    assert norm.norm() == norm


def test_union_contains_both():
    a = r(0, 0, 2, 2)
    b = r(5, -3, 1, 4)
    u = a.union(b)
    for rect in (a, b.norm()):
        assert u.min.x <= rect.min.x and u.min.y <= rect.min.y
        assert u.max.x >= rect.max.x and u.max.y >= rect.max.y
    assert a.union(a) == a


def test_box_union_and_apply():
    a = Box(Vec3(0, 0, 0), Vec3(1, 1, 1))
    b = Box(Vec3(-1, 2, -3), Vec3(0, 3, 0))
    u = a.union(b)
    assert u.min == Vec3(-1, 0, -3)
    assert u.max == Vec3(1, 3, 1)
    moved = a.apply(Mat4.identity().translate(4, 5, 6))
    assert moved.min == Vec3(4, 5, 6)
    assert moved.max == Vec3(5, 6, 7)


def test_contains_is_strict_overlaps_is_inclusive():
    rect = r(0, 0, 10, 10)
    assert rect.contains(v2(5, 5))
    assert not rect.contains(v2(0, 5))
    assert rect.overlaps_point(Vec3(0, 5, 0))
    assert not rect.overlaps_point(Vec3(11, 5, 0))


def test_intersects():
    a = r(0, 0, 10, 10)
    assert a.intersects(r(10, 10, 20, 20))
    assert not a.intersects(r(11, 0, 20, 10))


def test_cut_left_shrinks_in_place():
    rect = r(0, 0, 10, 10)
    cut = rect.cut_left(3)
    assert cut == r(0, 0, 3, 10)
    assert rect == r(3, 0, 10, 10)


def test_cut_right_top_bottom():
    rect = r(0, 0, 10, 10)
    assert rect.cut_right(2) == r(8, 0, 10, 10)
    assert rect.cut_top(4) == r(0, 6, 8, 10)
    assert rect.cut_bottom(1) == r(0, 0, 8, 1)
    assert rect == r(0, 1, 8, 6)


def test_halves_do_not_modify():
    rect = r(0, 0, 10, 20)
    left = rect.left_half()
    right = rect.right_half()
    top = rect.top_half()
    bottom = rect.bottom_half()
    assert rect == r(0, 0, 10, 20)
    assert left.union(right) == rect
    assert top.union(bottom) == rect
    assert left.w() * 2 == rect.w()
    assert top.h() * 2 == rect.h()


def test_slice_square_is_centered():
    rect = r(0, 0, 10, 20)
    square = rect.slice_square(4)
    assert square.w() == pytest.approx(4)
    assert square.h() == pytest.approx(4)
    assert approx_vec2(square.center(), rect.center())


def test_sub_square():
    rect = r(0, 0, 10, 4)
    square = rect.sub_square()
    assert square.w() == square.h() == rect.h()
    assert square.center() == rect.center()


def test_fit_matches_target_center():
    rect = r(0, 0, 2, 1)
    target = r(0, 0, 10, 10)
    fitted = rect.fit(target)
    assert fitted.center() == target.center()
    assert fitted.w() == pytest.approx(target.w())
    assert fitted.w() / fitted.h() == pytest.approx(rect.w() / rect.h())


def test_fit_int_uses_whole_scale():
    rect = r(0, 0, 3, 3)
    target = r(0, 0, 10, 10)
    fitted = rect.fit_int(target)
    scale = fitted.w() / rect.w()
    assert scale == math.floor(rect.fit_scale(target))
    assert fitted.center() == target.center()


def test_center_scaled_keeps_center():
    rect = r(2, 2, 6, 8)
    scaled = rect.center_scaled(2)
    assert scaled.center() == rect.center()
    assert scaled.w() == 2 * rect.w()
    xy = rect.center_scaled_xy(1, 0.5)
    assert xy.w() == rect.w()
    assert xy.h() == rect.h() * 0.5


def test_pad_and_unpad_round_trip():
    rect = r(1, 2, 5, 9)
    assert rect.pad_all(3).unpad(r(3, 3, 3, 3)) == rect
    assert rect.pad_x(2).h() == rect.h()
    assert rect.pad_y(2).w() == rect.w()
    assert rect.pad_left(1).max == rect.max
    assert rect.pad_bottom(1).max == rect.max
    assert rect.pad_right(1).min == rect.min
    assert rect.pad_top(1).min == rect.min


def test_point_corners():
    rect = r(1, 2, 5, 9)
    assert rect.point(0, 0) == rect.min
    assert rect.point(1, 1) == rect.max
    assert rect.point(0.5, 0.5) == rect.center()


def test_anchor_aligns_edges():
    outer = r(0, 0, 10, 10)
    inner = r(0, 0, 2, 3)
    assert outer.anchor(inner, v2(1, 1)).max == outer.max
    assert outer.anchor(inner, v2(0, 0)).min == outer.min
    centered = outer.anchor(inner, v2(0.5, 0.5))
    assert centered.center() == outer.center()


def test_full_anchor_places_pivot_on_anchor():
    outer = r(0, 0, 10, 10)
    inner = r(0, 0, 2, 2)
    placed = outer.full_anchor(inner, v2(1, 1), v2(0, 0))
    assert placed.min == outer.max
    assert placed.w() == inner.w()


def test_move_min_to_own_min_is_noop():
    rect = r(2, 3, 4, 5)
    assert rect.move_min(rect.min) == rect


def test_layout_horizontal():
    rect = r(0, 0, 4, 2)
    assert rect.layout_horizontal(1, 5) == r(0, 0, 4, 2)
    row = rect.layout_horizontal(3, 0)
    assert row.w() == 3 * rect.w()
    assert row.h() == rect.h()


def test_snap_rounds_to_whole_numbers():
    rect = r(0.2, 1.7, 3.4, 4.6)
    snapped = rect.snap()
    for value in (snapped.min.x, snapped.min.y, snapped.max.x, snapped.max.y):
        assert value == int(value)
    assert abs(snapped.min.x - rect.min.x) <= 0.5
    assert abs(snapped.max.y - rect.max.y) <= 0.5


def test_scaled_and_scaled_xy():
    rect = r(1, 2, 3, 4)
    assert rect.scaled(2) == r(2, 4, 6, 8)
    assert rect.scaled_xy(v2(1, 2)) == r(1, 4, 3, 8)
    assert rect.moved(v2(1, 1)) == r(2, 3, 4, 5)


def test_rect_draw_maps_corners():
    src = r(0, 0, 2, 4)
    dst = r(10, 10, 20, 30)
    mat = src.rect_draw(dst)
    low = mat.apply(src.min.vec3())
    high = mat.apply(src.max.vec3())
    assert low.x == pytest.approx(10)
    assert low.y == pytest.approx(10)
    assert high.x == pytest.approx(20)
    assert high.y == pytest.approx(30)
    assert low.z == pytest.approx(0)
    center = mat.apply(src.center().vec3())
    assert center.x == pytest.approx(15)
    assert center.y == pytest.approx(20)


def test_fit_scale_zero_width_raises():
    with pytest.raises(ZeroDivisionError):
        r(0, 0, 0, 1).fit_scale(r(0, 0, 1, 1))


def test_default_rect_is_empty():
    rect = Rect()
    assert rect.w() == 0 and rect.h() == 0
    assert rect.center() == Vec2()