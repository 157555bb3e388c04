"""Tests for absorption of bodies by the primary body."""

from gravsim.collisions import find_colliding, prune_collisions, swap_remove
from gravsim.data_models import Body
from gravsim.physics import step


def _star(radius=10):
    return Body((0.0, 0.0), (0.0, 0.0), radius, 1000.0, is_dynamic=False)


def _planet(x, y=0.0):
    return Body((x, y), (0.0, 0.0), 1, 1.0)


def test_inside_radius_is_removed_boundary_is_kept():
    """Distance strictly below the primary radius is a collision; equality is not."""
    star = _star(10)
    inside = _planet(9.99)
    boundary = _planet(0.0, -10.0)
    bodies = [star, inside, boundary]

    step(bodies)

    ids = [b.id for b in bodies]
    assert inside.id not in ids
    assert boundary.id in ids
    assert ids[0] == star.id


def test_multiple_removals_in_one_tick():
    """Bodies at indices 1, 2 and 3 colliding together are all removed, and only they are."""
    star = _star(10)
    hits = [_planet(1.0), _planet(0.0, 2.0), _planet(-3.0)]
    keep = _planet(500.0)
    bodies = [star] + hits + [keep]

    removed = prune_collisions(bodies)

    assert {b.id for b in removed} == {b.id for b in hits}
    assert [b.id for b in bodies] == [star.id, keep.id]


def test_interleaved_removals_keep_the_right_bodies():
    """Swap-removal never drops a non-colliding body, whatever the index pattern."""
    star = _star(10)
    a = _planet(1.0)
    x = _planet(100.0)
    b = _planet(-1.0)
    y = _planet(200.0)
    z = _planet(300.0)
    c = _planet(0.0, 5.0)
    bodies = [star, a, x, b, y, z, c]

    removed = prune_collisions(bodies)

    assert {r.id for r in removed} == {a.id, b.id, c.id}
    assert bodies[0] is star
    assert {body.id for body in bodies} == {star.id, x.id, y.id, z.id}
    assert len(bodies) == 4


def test_primary_is_never_a_candidate():
    """Index 0 is never pruned, even though it is at distance 0 from itself."""
    star = _star(10)
    bodies = [star]
    assert find_colliding(bodies) == []
    assert prune_collisions(bodies) == []
    assert bodies == [star]
    assert prune_collisions([]) == []


def test_bodies_do_not_collide_with_each_other():
    """Overlapping non-primary bodies are left alone."""
    star = _star(10)
    a = Body((100.0, 0.0), (0.0, 0.0), 20, 1.0)
    b = Body((101.0, 0.0), (0.0, 0.0), 20, 1.0)
    bodies = [star, a, b]

    assert prune_collisions(bodies) == []
    assert len(bodies) == 3


def test_swap_remove():
    """The last element fills the hole, and removing the last element just pops."""
    items = [_planet(float(i)) for i in range(4)]
    first, second, third, last = items

    assert swap_remove(items, 1) is second
    assert items == [first, last, third]
    assert swap_remove(items, 2) is third
    assert items == [first, last]
