#!/usr/bin/env python3
"""
Unit tests for the container's public API.
"""

import random
import unittest

from pyioc import Binding, ConstructibleNotFoundError, Container, Direct, MappingLoader


class ClassInstance:
    def foo(self):
        return "from ClassInstance"


class ClassInstance2:
    def __init__(self, config):
        self._config = config

    def config(self):
        return self._config


class HasherInstance:
    def make(self):
        return "Make some hashing"


class ConfigInstance:
    def grab(self):
        return "Grab config"


class StarInstance:
    def __init__(self, config):
        self._config = config

    def config(self):
        return self._config


class SingletonInstance:
    def __init__(self):
        self._num = random.random()

    def greet(self):
        return self._num


class TestBinding(unittest.TestCase):
    """Test binding and making."""

    def setUp(self):
        self.ioc = Container()

    def test_binds_items(self):
        """Test that bound classes are constructed on make."""
        self.ioc.bind("hash", HasherInstance)
        self.ioc.bind("config", ConfigInstance)
        self.ioc.bind("class", ClassInstance)

        hasher = self.ioc.make("hash")
        self.assertIsInstance(hasher, HasherInstance)
        self.assertEqual(hasher.make(), "Make some hashing")

        config = self.ioc.make("config")
        self.assertIsInstance(config, ConfigInstance)
        self.assertEqual(config.grab(), "Grab config")

        class_instance = self.ioc.make("class")
        self.assertIsInstance(class_instance, ClassInstance)
        self.assertEqual(class_instance.foo(), "from ClassInstance")

    def test_non_shared_binding_builds_fresh_values(self):
        """Test that a plain binding builds a new value on every make."""
        self.ioc.bind("hash", HasherInstance)

        self.assertIsNot(self.ioc.make("hash"), self.ioc.make("hash"))
        self.assertFalse(self.ioc.is_shared("hash"))

    def test_binding_is_recorded(self):
        """Test that the binding is visible through the bindings snapshot."""
        self.ioc.bind("hash", HasherInstance)

        self.assertEqual(self.ioc.bindings, {"hash": Binding("hash", Direct(HasherInstance), False)})

    def test_factory_function_binding(self):
        """Test binding a factory that returns an arbitrary object."""
        self.ioc.bind("star", lambda: StarInstance(ConfigInstance()))

        self.assertEqual(self.ioc.make("star").config().grab(), "Grab config")

    def test_rebinding_replaces_binding(self):
        """Test that a later bind wins."""
        self.ioc.bind("thing", HasherInstance)
        self.ioc.bind("thing", ConfigInstance)

        self.assertIsInstance(self.ioc.make("thing"), ConfigInstance)

    def test_rebinding_evicts_cached_instance(self):
        """Test that binding a name drops the singleton cached for it."""
        self.ioc.singleton("thing", HasherInstance)
        first = self.ioc.make("thing")

        self.ioc.bind("thing", ConfigInstance)

        self.assertNotIn("thing", self.ioc.instances)
        second = self.ioc.make("thing")
        self.assertIsNot(first, second)
        self.assertIsInstance(second, ConfigInstance)

    def test_bind_if_does_not_override(self):
        """Test that bind_if leaves an existing binding in place."""
        self.ioc.bind_if("foo", lambda: {"hello": "world"})
        self.assertEqual(self.ioc.make("foo")["hello"], "world")

        self.ioc.bind_if("foo", HasherInstance)
        self.assertEqual(self.ioc.make("foo")["hello"], "world")

    def test_bind_if_respects_instances_and_aliases(self):
        """Test that instances and aliases count as bound for bind_if."""
        self.ioc.instance("foo", "bar")
        self.ioc.alias("hash", "hasher")

        self.ioc.bind_if("foo", HasherInstance)
        self.ioc.bind_if("hasher", ConfigInstance)

        self.assertEqual(self.ioc.make("foo"), "bar")
        self.assertNotIn("hasher", self.ioc.bindings)


class TestDependencyInjection(unittest.TestCase):
    """Test constructor injection by parameter name."""

    def setUp(self):
        self.ioc = Container()

    def test_injects_dependencies(self):
        """Test that a parameter named after a binding is injected."""
        self.ioc.bind("config", ConfigInstance)
        self.ioc.bind("star", StarInstance)
        self.ioc.bind("class", ClassInstance2)

        star = self.ioc.make("star")
        self.assertIsInstance(star, StarInstance)
        self.assertEqual(star.config().grab(), "Grab config")

        class_instance = self.ioc.make("class")
        self.assertIsInstance(class_instance, ClassInstance2)
        self.assertEqual(class_instance.config().grab(), "Grab config")

    def test_injects_shared_dependency(self):
        """Test that a singleton dependency is injected by identity."""
        self.ioc.singleton("config", ConfigInstance)
        self.ioc.bind("star", StarInstance)

        self.assertIs(self.ioc.make("star").config(), self.ioc.make("config"))

    def test_missing_dependency_raises(self):
        """Test that an unresolvable dependency aborts construction."""
        self.ioc.bind("star", StarInstance)

        with self.assertRaisesRegex(ConstructibleNotFoundError, "Cannot find module"):
            self.ioc.make("star")

    def test_resolves_factory_with_parameters(self):
        """Test overrides and container values mixed in declaration order."""
        self.ioc.instance("foo", "bar")
        self.ioc.instance("bar", "baz")

        def testing(bar, id, foo):
            return {"bar": bar, "id": id, "foo": foo}

        self.ioc.bind("testing", testing)

        result = self.ioc.make("testing", {"id": "some id"})

        self.assertEqual(result, {"bar": "baz", "id": "some id", "foo": "bar"})

    def test_resolves_class_with_parameters(self):
        """Test overrides are matched by name for class constructors."""
        self.ioc.instance("foo", "bar")
        self.ioc.instance("bar", "baz")

        class Testing:
            def __init__(self, bar, id, foo):
                self.bar = bar
                self.id = id
                self.foo = foo

        self.ioc.bind("testing", Testing)

        result = self.ioc.make("testing", {"id": "some id"})

        self.assertEqual(result.bar, "baz")
        self.assertEqual(result.id, "some id")
        self.assertEqual(result.foo, "bar")

    def test_override_takes_precedence_over_binding(self):
        """Test that a supplied parameter is used verbatim even when bound."""
        self.ioc.bind("config", ConfigInstance)
        self.ioc.bind("star", StarInstance)

        star = self.ioc.make("star", {"config": "custom"})

        self.assertEqual(star.config(), "custom")

    def test_dynamically_rebounds_instances(self):
        """Test that replacing an instance changes what gets injected."""
        self.ioc.bind("hello", lambda foo: {"foo": foo})

        self.ioc.instance("foo", "bar")
        self.assertEqual(self.ioc.make("hello")["foo"], "bar")

        self.ioc.instance("foo", "new bar")
        self.assertEqual(self.ioc.make("hello")["foo"], "new bar")


class TestSingletons(unittest.TestCase):
    """Test shared bindings."""

    def setUp(self):
        self.ioc = Container()

    def test_creates_singleton(self):
        """Test that a singleton is built once."""
        self.ioc.singleton("singleton", SingletonInstance)

        first = self.ioc.make("singleton")
        second = self.ioc.make("singleton")

        self.assertIs(first, second)
        self.assertEqual(first.greet(), second.greet())
        self.assertTrue(self.ioc.is_shared("singleton"))

    def test_can_share_factories(self):
        """Test that a shared factory result is reused."""
        self.ioc.singleton("foo", lambda: {"hello": "world", "world": "hello"})

        self.assertIs(self.ioc.make("foo"), self.ioc.make("foo"))

    def test_forget_instance_drops_singleton(self):
        """Test that a forgotten name falls through to the loader."""
        self.ioc.singleton("hash", HasherInstance)
        self.assertEqual(self.ioc.make("hash").make(), "Make some hashing")

        self.ioc.forget_instance("hash")

        self.assertFalse(self.ioc.bound("hash"))
        with self.assertRaisesRegex(ConstructibleNotFoundError, "Cannot find module"):
            self.ioc.make("hash")


class TestAliases(unittest.TestCase):
    """Test alias registration and lookup."""

    def setUp(self):
        self.ioc = Container()

    def test_creates_aliases(self):
        """Test that an alias resolves like its target."""
        self.ioc.bind("hash", HasherInstance)
        self.ioc.alias("hash", "hasher")
        self.ioc.bind("class", ClassInstance)
        self.ioc.alias("class", "class-alias")

        self.assertEqual(self.ioc.make("hasher").make(), "Make some hashing")
        self.assertEqual(self.ioc.make("class-alias").foo(), "from ClassInstance")

    def test_alias_of_singleton_shares_identity(self):
        """Test that an alias of a shared binding yields the same object."""
        self.ioc.singleton("hash", HasherInstance)
        self.ioc.alias("hash", "hasher")

        self.assertIs(self.ioc.make("hasher"), self.ioc.make("hash"))

    def test_alias_is_one_level(self):
        """Test that aliases of aliases are not followed."""
        self.ioc.alias("hash", "hasher")
        self.ioc.alias("hasher", "h")

        self.assertEqual(self.ioc.get_alias("h"), "hasher")
        self.assertEqual(self.ioc.get_alias("hasher"), "hash")
        self.assertEqual(self.ioc.get_alias("hash"), "hash")

    def test_make_follows_one_alias_hop(self):
        """Test that make through an alias of an alias loads the middle name."""
        ioc = Container(loader=MappingLoader({"hasher": ConfigInstance}))
        ioc.bind("hash", HasherInstance)
        ioc.alias("hash", "hasher")
        ioc.alias("hasher", "h")

        self.assertIsInstance(ioc.make("h"), ConfigInstance)
        self.assertIsInstance(ioc.make("hasher"), HasherInstance)

    def test_alias_queries(self):
        """Test is_alias and bound for aliases."""
        self.ioc.alias("hash", "hasher")

        self.assertTrue(self.ioc.is_alias("hasher"))
        self.assertFalse(self.ioc.is_alias("hash"))
        self.assertTrue(self.ioc.bound("hasher"))

    def test_later_alias_overwrites(self):
        """Test that re-aliasing the same key replaces the target."""
        self.ioc.instance("a", 1)
        self.ioc.instance("b", 2)
        self.ioc.alias("a", "x")
        self.ioc.alias("b", "x")

        self.assertEqual(self.ioc.make("x"), 2)

    def test_instance_replaces_alias(self):
        """Test that an instance registered under an alias name wins."""
        self.ioc.bind("hash", HasherInstance)
        self.ioc.alias("hash", "hasher")

        self.ioc.instance("hasher", "direct")

        self.assertFalse(self.ioc.is_alias("hasher"))
        self.assertEqual(self.ioc.make("hasher"), "direct")


class TestInstances(unittest.TestCase):
    """Test explicit instance registration."""

    def setUp(self):
        self.ioc = Container()

    def test_stores_instances(self):
        """Test that make returns registered instances."""
        hasher = HasherInstance()
        class_instance = ClassInstance()

        self.ioc.instance("foo", hasher)
        self.assertEqual(self.ioc.make("foo").make(), "Make some hashing")

        self.ioc.instance("foo", "bar")
        self.assertEqual(self.ioc.make("foo"), "bar")

        self.ioc.instance("classInstance", class_instance)
        self.assertIs(self.ioc.make("classInstance"), class_instance)

    def test_instance_wins_over_binding(self):
        """Test that an instance bypasses construction of a bound constructible."""
        self.ioc.bind("foo", HasherInstance)
        value = object()

        self.ioc.instance("foo", value)

        self.assertIs(self.ioc.make("foo"), value)

    def test_none_is_a_valid_instance(self):
        """Test that a cached None is returned rather than loaded."""
        self.ioc.instance("nothing", None)

        self.assertIsNone(self.ioc.make("nothing"))
        self.assertTrue(self.ioc.bound("nothing"))

    def test_bind_after_instance_makes_binding_active(self):
        """Test that rebinding evicts a registered instance."""
        self.ioc.instance("foo", "bar")
        self.ioc.bind("foo", HasherInstance)

        self.assertIsInstance(self.ioc.make("foo"), HasherInstance)


class TestForget(unittest.TestCase):
    """Test clearing container state."""

    def setUp(self):
        self.ioc = Container()

    def test_forget_all(self):
        """Test that forget_all clears every store."""
        self.assertEqual(self.ioc.bindings, {})
        self.assertEqual(self.ioc.instances, {})
        self.assertEqual(self.ioc.resolved, frozenset())

        self.ioc.bind("hash", HasherInstance)
        self.ioc.singleton("config", ConfigInstance)
        self.ioc.alias("hash", "hasher")
        self.ioc.make("config")

        self.ioc.forget_all()

        self.assertEqual(self.ioc.bindings, {})
        self.assertEqual(self.ioc.instances, {})
        self.assertEqual(self.ioc.aliases, {})
        self.assertEqual(self.ioc.resolved, frozenset())

    def test_forget_instance_removes_alias(self):
        """Test that forget_instance removes an alias keyed by the name."""
        self.ioc.alias("hash", "hasher")

        self.ioc.forget_instance("hasher")

        self.assertFalse(self.ioc.is_alias("hasher"))

    def test_resolved_markers(self):
        """Test that every successful make marks the name resolved."""
        self.ioc.bind("hash", HasherInstance)
        self.assertFalse(self.ioc.is_resolved("hash"))

        self.ioc.make("hash")

        self.assertTrue(self.ioc.is_resolved("hash"))
        self.assertEqual(self.ioc.get_instance_count(), 0)


if __name__ == "__main__":
    unittest.main()
