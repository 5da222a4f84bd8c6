"""Bounding volume hierarchies over hittable objects."""

from __future__ import annotations

from collections.abc import Iterable

from weekendtracer.aabb import AABB
from weekendtracer.hittable_list import HitRecord, Hittable
from weekendtracer.interval import Interval
from weekendtracer.ray import Ray


class BVHNode(Hittable):
    """A binary tree of bounding boxes; the input collection is left unchanged."""

    def __init__(self, objects: Iterable[Hittable]) -> None:
        items = list(objects)
        if not items:
            raise ValueError("cannot build a bounding volume hierarchy of no objects")

        bbox = AABB.EMPTY
        for obj in items:
            bbox = AABB.enclosing(bbox, obj.bounding_box())
        self._bbox = bbox

        self.left: Hittable
        self.right: Hittable
        if len(items) == 1:
            self.left = self.right = items[0]
        elif len(items) == 2:
            self.left, self.right = items
        else:
            axis = bbox.longest_axis()
            items.sort(key=lambda o: o.bounding_box().axis_interval(axis).min)
            mid = len(items) // 2
            self.left = BVHNode(items[:mid])
            self.right = BVHNode(items[mid:])

    def hit(self, r: Ray, ray_t: Interval) -> HitRecord | None:
        if not self._bbox.hit(r, ray_t):
            return None

        left_rec = self.left.hit(r, ray_t)
        right_max = left_rec.t if left_rec is not None else ray_t.max
        right_rec = self.right.hit(r, Interval(ray_t.min, right_max))
        return right_rec if right_rec is not None else left_rec

    def bounding_box(self) -> AABB:
        return self._bbox