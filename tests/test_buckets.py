import gc
import weakref

from componentry import Component, ComponentBucket, FellowContainer, type_ids_of
from tests.examples import Bicycle, Car, Clock, LocalClock, Transport


def test_first_by_class_and_by_name():
    bucket = ComponentBucket()
    clock = Clock()
    bucket.append(clock)

    assert bucket.first(Clock) is clock
    assert bucket.first("Clock") is clock
    assert bucket.first("Office") is None


def test_members_match_their_base_classes():
    bucket = ComponentBucket()
    local_clock = LocalClock()
    car = Car()
    bucket.append(local_clock)
    bucket.append(car)

    assert bucket.first(Clock) is local_clock
    assert bucket.first("LocalClock") is local_clock
    assert bucket.first(Transport) is car
    assert bucket.of_type("Component") == [local_clock, car]


def test_tag_is_an_additional_type_id():
    bucket = ComponentBucket()
    clock = Clock()
    bucket.append(clock, "GlobalClock")

    assert bucket.first("GlobalClock") is clock
    assert bucket.first(Clock) is clock


def test_insertion_order_is_kept():
    bucket = ComponentBucket()
    items = [Car(), Bicycle(), Car()]
    for item in items:
        bucket.append(item)

    assert bucket.all() == items
    assert list(bucket) == items
    assert bucket.of_type(Car) == [items[0], items[2]]
    assert len(bucket) == 3


def test_remove_compares_by_reference():
    bucket = ComponentBucket()
    first = [1]
    second = [1]
    bucket.append(first)
    bucket.append(second)

    assert bucket.remove(second) is True

    assert bucket.all() == [first]
    assert bucket.all()[0] is first
    assert first in bucket
    assert second not in bucket


def test_remove_absent_returns_false():
    bucket = ComponentBucket()
    bucket.append(Car())

    assert bucket.remove(Car()) is False
    assert len(bucket) == 1


def test_remove_updates_the_index():
    bucket = ComponentBucket()
    car = Car()
    bucket.append(car, "Vehicle")

    bucket.remove(car)

    assert bucket.first(Car) is None
    assert bucket.first("Vehicle") is None
    assert bucket.contains_type(Transport) is False


def test_remove_type():
    bucket = ComponentBucket()
    car_1, bike, car_2 = Car(), Bicycle(), Car()
    for item in (car_1, bike, car_2):
        bucket.append(item)

    removed = bucket.remove_type("Car")

    assert removed == [car_1, car_2]
    assert bucket.all() == [bike]
    assert bucket.remove_type("Car") == []


def test_contains_type():
    bucket = FellowContainer()
    bucket.append(42)

    assert bucket.contains_type(int) is True
    assert bucket.contains_type("int") is True
    assert bucket.contains_type(str) is False


def test_type_ids_do_not_keep_classes_alive():
    class Temporary(Clock):
        pass

    bucket = ComponentBucket()
    bucket.append(Temporary())

    assert bucket.first("Temporary") is not None
    assert bucket.first(Clock) is not None

    reference = weakref.ref(Temporary)
    del bucket
    del Temporary
    gc.collect()

    assert reference() is None


def test_subclasses_do_not_inherit_type_ids():
    assert type_ids_of(Clock())[:4] == (Clock, "Clock", Component, "Component")
    assert type_ids_of(LocalClock())[:2] == (LocalClock, "LocalClock")
    assert type_ids_of(42, "answer") == (int, "int", "answer")
