# src/dungeongen/mapgen/bsp.py
# Binary space partition placer.
#   1) split_all:    carve the board into a tree of regions (depth-first, left first)
#   2) create_rooms: post-order; one room per true leaf, one corridor per internal node
#   3) walk:         pre-order, left first; the generator stamps rooms + corridors
# The tree is an index arena (nodes[0] is the root) walked with explicit stacks.

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List, Optional, Sequence, Tuple

from ..config import GeneratorConfig
from ..level import Level
from ..rng import PMRandom
from ..room import Layout, Room
from ..tiles import Tile
from .corridors import l_corridor

logger = logging.getLogger(__name__)


@dataclass
class Leaf:
    x: int
    y: int
    width: int
    height: int
    min_size: int
    room: Optional[Room] = None
    corridors: List[Room] = field(default_factory=list)
    left: Optional[int] = None
    right: Optional[int] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _split_horizontally(leaf: Leaf, rng: PMRandom, split_ratio: float) -> bool:
    # Random default, overridden when the region is clearly too wide or too tall.
    split_horz = rng.gen_range(0, 2) == 1
    if leaf.width > leaf.height and leaf.width / leaf.height >= split_ratio:
        split_horz = False
    elif leaf.height > leaf.width and leaf.height / leaf.width >= split_ratio:
        split_horz = True
    return split_horz


def _span(rng: PMRandom, min_size: int, extent: int) -> int:
    """Room size along one axis: [min_size, extent), or the whole extent if that is empty."""
    if extent <= min_size:
        return extent
    return rng.gen_range(min_size, extent)


def _offset(rng: PMRandom, extent: int, size: int) -> int:
    if extent <= size:
        return 0
    return rng.gen_range(0, extent - size)


def _fits(template: Layout, leaf: Leaf) -> bool:
    return len(template[0]) < leaf.width and len(template) < leaf.height


def _random_point(room: Room, rng: PMRandom) -> Tuple[int, int]:
    """A random WALKABLE cell of the room (x then y for plain rooms)."""
    cells = [(x, y) for x, y, tile in room.cells() if tile is Tile.WALKABLE]
    if cells and len(cells) < room.width * room.height:
        return cells[rng.gen_range(0, len(cells))]
    return rng.gen_range(room.x, room.x2), rng.gen_range(room.y, room.y2)


@dataclass
class BspTree:
    nodes: List[Leaf]
    split_ratio: float = 1.25

    @classmethod
    def root(cls, width: int, height: int, min_size: int, split_ratio: float = 1.25) -> "BspTree":
        return cls(nodes=[Leaf(0, 0, width, height, min_size)], split_ratio=split_ratio)

    def __getitem__(self, index: int) -> Leaf:
        return self.nodes[index]

    # ---------- phase 1 ----------

    def split(self, index: int, rng: PMRandom) -> bool:
        leaf = self.nodes[index]
        if not leaf.is_leaf():
            return False

        split_horz = _split_horizontally(leaf, rng, self.split_ratio)
        max_pos = (leaf.height if split_horz else leaf.width) - leaf.min_size
        if max_pos <= leaf.min_size:
            return False  # too small for two children

        pos = rng.gen_range(leaf.min_size, max_pos)
        if split_horz:
            left = Leaf(leaf.x, leaf.y, leaf.width, pos, leaf.min_size)
            right = Leaf(leaf.x, leaf.y + pos, leaf.width, leaf.height - pos, leaf.min_size)
        else:
            left = Leaf(leaf.x, leaf.y, pos, leaf.height, leaf.min_size)
            right = Leaf(leaf.x + pos, leaf.y, leaf.width - pos, leaf.height, leaf.min_size)

        leaf.left = len(self.nodes)
        self.nodes.append(left)
        leaf.right = len(self.nodes)
        self.nodes.append(right)
        return True

    def split_all(self, rng: PMRandom) -> None:
        stack = [0]
        while stack:
            index = stack.pop()
            if self.split(index, rng):
                leaf = self.nodes[index]
                stack.append(leaf.right)
                stack.append(leaf.left)

    # ---------- phase 2 ----------

    def get_room(self, index: int) -> Optional[Room]:
        """First room found descending left before right."""
        stack = [index]
        while stack:
            leaf = self.nodes[stack.pop()]
            if leaf.is_leaf():
                if leaf.room is not None:
                    return leaf.room
                continue
            stack.append(leaf.right)
            stack.append(leaf.left)
        return None

    def _post_order(self) -> List[int]:
        out: List[int] = []
        stack = [0]
        while stack:
            index = stack.pop()
            out.append(index)
            leaf = self.nodes[index]
            if not leaf.is_leaf():
                stack.append(leaf.left)
                stack.append(leaf.right)
        out.reverse()
        return out

    def create_room(
        self,
        index: int,
        rng: PMRandom,
        min_width: int,
        min_height: int,
        templates: Deque[Layout],
    ) -> Room:
        leaf = self.nodes[index]
        # first queued template that fits; larger ones wait for a bigger leaf
        slot = next((i for i, t in enumerate(templates) if _fits(t, leaf)), None)
        if slot is not None:
            template = templates[slot]
            del templates[slot]
            width, height = len(template[0]), len(template)
            x = rng.gen_range(0, leaf.width - width)
            y = rng.gen_range(0, leaf.height - height)
            room = Room.create(leaf.x + x, leaf.y + y, width, height, template)
        else:
            width = _span(rng, min_width, leaf.width)
            height = _span(rng, min_height, leaf.height)
            x = _offset(rng, leaf.width, width)
            y = _offset(rng, leaf.height, height)
            room = Room.create(leaf.x + x, leaf.y + y, width, height)
        leaf.room = room
        return room

    def create_corridors(self, index: int, rng: PMRandom) -> None:
        leaf = self.nodes[index]
        left_room = self.get_room(leaf.left)
        right_room = self.get_room(leaf.right)
        if left_room is None or right_room is None:
            return

        # a random walkable cell inside each room, not the centres
        left_point = _random_point(left_room, rng)
        right_point = _random_point(right_room, rng)
        horizontal_first = rng.gen_range(0, 2) == 0
        self.nodes[leaf.left].corridors.extend(
            l_corridor(left_point, right_point, horizontal_first)
        )

    def create_rooms(
        self,
        rng: PMRandom,
        min_width: int,
        min_height: int,
        templates: Sequence[Layout] = (),
    ) -> None:
        queue: Deque[Layout] = deque(templates)
        for index in self._post_order():
            if self.nodes[index].is_leaf():
                self.create_room(index, rng, min_width, min_height, queue)
            else:
                self.create_corridors(index, rng)

    # ---------- phase 3 ----------

    def walk(self) -> Iterator[Leaf]:
        """Pre-order, left first. Single pass."""
        stack = [0]
        while stack:
            leaf = self.nodes[stack.pop()]
            yield leaf
            if not leaf.is_leaf():
                stack.append(leaf.right)
                stack.append(leaf.left)

    def leaves(self) -> Iterator[Leaf]:
        return (leaf for leaf in self.walk() if leaf.is_leaf())

    def depth(self) -> int:
        deepest = 0
        stack: List[Tuple[int, int]] = [(0, 0)]
        while stack:
            index, d = stack.pop()
            deepest = max(deepest, d)
            leaf = self.nodes[index]
            if not leaf.is_leaf():
                stack.append((leaf.left, d + 1))
                stack.append((leaf.right, d + 1))
        return deepest


def build_tree(
    width: int,
    height: int,
    rng: PMRandom,
    config: GeneratorConfig,
    templates: Sequence[Layout] = (),
) -> BspTree:
    tree = BspTree.root(width, height, config.bsp_min_size, config.split_ratio)
    tree.split_all(rng)
    tree.create_rooms(rng, config.bsp_min_room_width, config.bsp_min_room_height, templates)
    return tree


def generate_bsp(
    level: Level,
    rng: PMRandom,
    config: GeneratorConfig,
    templates: Sequence[Layout] = (),
) -> Level:
    tree = build_tree(level.width, level.height, rng, config, templates)
    for leaf in tree.walk():
        if leaf.is_leaf() and leaf.room is not None:
            level.add_room(leaf.room)
        for corridor in leaf.corridors:
            level.add_room(corridor)
    logger.debug("bsp tree: %d nodes, depth %d, %d rooms stamped",
                 len(tree.nodes), tree.depth(), len(level.rooms))
    return level
