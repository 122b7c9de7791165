from __future__ import annotations

from chaosmod_config.check_tree import (
    CheckTree,
    apply_effect_states,
    build_effect_tree,
    collect_effect_states,
)
from chaosmod_config.effects import EffectCategory, EffectRecord, EffectRegistry


def _three_level_tree():
    tree = CheckTree()
    root = tree.add_node("root")
    mid_a = tree.add_node("mid_a", root)
    mid_b = tree.add_node("mid_b", root)
    leaves_a = [tree.add_node(f"a{i}", mid_a) for i in range(3)]
    leaves_b = [tree.add_node(f"b{i}", mid_b) for i in range(2)]
    return tree, root, mid_a, mid_b, leaves_a, leaves_b


def _registry() -> EffectRegistry:
    return EffectRegistry(
        [
            EffectRecord("P1", 1, "Player one", EffectCategory.PLAYER),
            EffectRecord("P2", 2, "Player two", EffectCategory.PLAYER),
            EffectRecord("V1", 10, "Vehicle one", EffectCategory.VEHICLE),
            EffectRecord("V2", 11, "Vehicle two", EffectCategory.VEHICLE),
            EffectRecord("W1", 20, "Weather one", EffectCategory.WEATHER),
        ]
    )


def test_new_nodes_start_checked() -> None:
    tree, root, *_ = _three_level_tree()
    assert all(tree.is_checked(i) for i in range(len(tree)))
    assert tree.roots() == [root]


def test_set_checked_cascades_to_all_descendants() -> None:
    tree, root, *_ = _three_level_tree()

    tree.set_checked(root, False)
    assert not tree.is_checked(root)
    assert all(not tree.is_checked(i) for i in tree.descendants(root))

    tree.set_checked(root, True)
    assert tree.is_checked(root)
    assert all(tree.is_checked(i) for i in tree.descendants(root))


def test_descendants_are_depth_first_in_insertion_order() -> None:
    tree, root, mid_a, mid_b, leaves_a, leaves_b = _three_level_tree()
    assert list(tree.descendants(root)) == [mid_a, *leaves_a, mid_b, *leaves_b]


def test_parent_is_or_of_children_after_leaf_toggle() -> None:
    tree, _root, mid_a, _mid_b, leaves_a, _leaves_b = _three_level_tree()

    tree.set_checked(leaves_a[0], False)
    tree.set_checked(leaves_a[1], False)
    assert tree.is_checked(mid_a)  # a2 still on

    tree.set_checked(leaves_a[2], False)
    assert not tree.is_checked(mid_a)

    tree.set_checked(leaves_a[1], True)
    assert tree.is_checked(mid_a)


def test_leaf_change_does_not_reach_grandparent() -> None:
    tree, root, mid_a, mid_b, leaves_a, leaves_b = _three_level_tree()
    tree.set_checked(mid_b, False)
    assert tree.is_checked(root)

    for leaf in leaves_a:
        tree.set_checked(leaf, False)

    # mid_a recomputed, root left stale: only one level is recomputed.
    assert not tree.is_checked(mid_a)
    assert tree.is_checked(root)


def test_mid_level_change_recomputes_its_parent() -> None:
    tree, root, mid_a, mid_b, _leaves_a, _leaves_b = _three_level_tree()
    tree.set_checked(mid_a, False)
    assert tree.is_checked(root)
    tree.set_checked(mid_b, False)
    assert not tree.is_checked(root)


def test_recompute_does_not_cascade_down() -> None:
    tree = CheckTree()
    group = tree.add_node("group")
    a = tree.add_node("a", group)
    b = tree.add_node("b", group)
    tree.set_checked(a, False)
    tree.recompute(group)
    assert tree.is_checked(group)
    assert not tree.is_checked(a)
    assert tree.is_checked(b)


def test_childless_node_is_caller_controlled() -> None:
    tree = CheckTree()
    lonely = tree.add_node("lonely")
    tree.set_checked(lonely, False)
    assert not tree.is_checked(lonely)
    assert tree.toggle(lonely) is True


def test_change_callback_sees_every_assignment() -> None:
    seen = []
    tree = CheckTree(on_change=lambda idx, val: seen.append((idx, val)))
    group = tree.add_node("group")
    leaf = tree.add_node("leaf", group)

    tree.set_checked(leaf, False)
    assert seen == [(leaf, False), (group, False)]

    seen.clear()
    tree.set_checked(group, True)
    assert (group, True) in seen and (leaf, True) in seen


def test_build_effect_tree_groups_by_category() -> None:
    registry = _registry()
    tree, leaf_by_id, groups = build_effect_tree(registry)

    assert [tree.label(r) for r in tree.roots()] == ["Player", "Vehicle", "Peds", "Time", "Weather", "Misc"]
    assert [tree.label(c) for c in tree.children(groups[EffectCategory.VEHICLE])] == ["Vehicle one", "Vehicle two"]
    assert tree.parent(leaf_by_id[20]) == groups[EffectCategory.WEATHER]
    # leaves are created before the group nodes
    assert max(leaf_by_id.values()) < min(groups.values())


def test_unchecking_last_vehicle_leaf_clears_vehicle_group_only() -> None:
    tree, leaf_by_id, groups = build_effect_tree(_registry())
    tree.set_checked(leaf_by_id[11], False)
    assert tree.is_checked(groups[EffectCategory.VEHICLE])

    tree.set_checked(leaf_by_id[10], False)
    assert not tree.is_checked(groups[EffectCategory.VEHICLE])
    assert tree.is_checked(groups[EffectCategory.PLAYER])
    assert tree.is_checked(leaf_by_id[1])


def test_apply_and_collect_effect_states() -> None:
    tree, leaf_by_id, groups = build_effect_tree(_registry())
    unknown = apply_effect_states(tree, leaf_by_id, {1: False, 2: False, 999: False})

    assert unknown == [999]
    assert not tree.is_checked(groups[EffectCategory.PLAYER])
    assert collect_effect_states(tree, leaf_by_id) == {1: False, 2: False, 10: True, 11: True, 20: True}
