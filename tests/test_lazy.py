"""Tests for deferred placeholders and batch loading."""

from unittest.mock import MagicMock

from forgeurl.core.lazy import BatchLoader, Lazy, is_lazy, unwrap
from forgeurl.core.models import Project


class TestLazy:
    def test_loader_is_not_called_until_needed(self):
        loader = MagicMock(return_value=Project(full_path="a/b"))
        placeholder = Lazy(loader)

        loader.assert_not_called()
        assert placeholder.is_resolved is False

    def test_attribute_access_forces_load_once(self):
        loader = MagicMock(return_value=Project(full_path="a/b"))
        placeholder = Lazy(loader)

        assert placeholder.full_path == "a/b"
        assert placeholder.full_path == "a/b"
        loader.assert_called_once_with()
        assert placeholder.is_resolved is True

    def test_isinstance_sees_loaded_class(self):
        placeholder = Lazy(lambda: Project(full_path="a/b"))
        assert isinstance(placeholder, Project)
        assert type(placeholder) is Lazy

    def test_equality_and_truthiness_follow_value(self):
        project = Project(full_path="a/b")
        assert Lazy(lambda: project) == project
        assert Lazy(lambda: project) == Lazy(lambda: Project(full_path="a/b"))
        assert not Lazy(lambda: None)

    def test_repr_reports_pending_state(self):
        placeholder = Lazy(lambda: Project(full_path="a/b"))
        assert repr(placeholder) == "<Lazy (pending)>"
        placeholder.resolve()
        assert "a/b" in repr(placeholder)

    def test_unwrap_and_is_lazy(self):
        project = Project(full_path="a/b")
        nested = Lazy(lambda: Lazy(lambda: project))

        assert is_lazy(nested) is True
        assert is_lazy(project) is False
        assert unwrap(nested) is project
        assert unwrap(project) is project


class TestBatchLoader:
    def test_pending_items_load_in_one_call(self):
        calls = []

        def load(items, loader):
            calls.append(list(items))
            for item in items:
                loader(item, Project(full_path=f"group/{item}"))

        first = BatchLoader.for_(1).batch(load)
        second = BatchLoader.for_(2).batch(load)
        assert BatchLoader.pending_count(load) == 2

        assert first.full_path == "group/1"
        assert second.full_path == "group/2"
        assert calls == [[1, 2]]
        assert BatchLoader.pending_count(load) == 0

    def test_items_added_after_run_start_a_new_batch(self):
        calls = []

        def load(items, loader):
            calls.append(list(items))
            for item in items:
                loader(item, item * 10)

        assert BatchLoader.for_(1).batch(load).resolve() == 10
        assert BatchLoader.for_(2).batch(load).resolve() == 20
        assert calls == [[1], [2]]

    def test_duplicate_items_are_loaded_once(self):
        seen = []

        def load(items, loader):
            seen.extend(items)
            for item in items:
                loader(item, item)

        a = BatchLoader.for_("x").batch(load)
        b = BatchLoader.for_("x").batch(load)

        assert a.resolve() == b.resolve() == "x"
        assert seen == ["x"]

    def test_unloaded_item_resolves_to_none(self):
        placeholder = BatchLoader.for_(99).batch(lambda items, loader: None)
        assert placeholder.resolve() is None

    def test_inline_lambdas_do_not_share_a_batch(self):
        calls = []

        placeholders = [
            BatchLoader.for_(item).batch(lambda items, loader: calls.append(list(items)))
            for item in (1, 2)
        ]
        for placeholder in placeholders:
            placeholder.resolve()

        assert calls == [[1], [2]]

    def test_unresolved_batch_stays_open_until_cleared(self):
        def load(items, loader):
            for item in items:
                loader(item, item)

        BatchLoader.for_(1).batch(load)
        assert BatchLoader.pending_count(load) == 1

        BatchLoader.clear()
        assert BatchLoader.pending_count(load) == 0

    def test_explicit_key_groups_different_functions(self):
        calls = []

        def load(items, loader):
            calls.append(list(items))
            for item in items:
                loader(item, item)

        first = BatchLoader.for_("a").batch(load, key="projects")
        second = BatchLoader.for_("b").batch(lambda items, loader: None, key="projects")

        assert second.resolve() == "b"
        assert first.resolve() == "a"
        assert calls == [["a", "b"]]


class TestDeferredRelations:
    """Entities built around a placeholder leave it pending until resolution."""

    def test_note_construction_does_not_run_batch(self):
        from forgeurl import build
        from forgeurl.core.models import Issue, Note

        calls = []

        def load(items, loader):
            calls.append(list(items))
            for item in items:
                loader(item, Issue(iid=item, project=Project(full_path="g/p")))

        first = BatchLoader.for_(1).batch(load)
        note = Note(id=9, noteable=first)
        second = BatchLoader.for_(2).batch(load)

        assert calls == []
        assert first.is_resolved is False

        assert build(note, only_path=True) == "/g/p/-/issues/1#note_9"
        assert second.iid == 2
        assert calls == [[1, 2]]

    def test_design_construction_does_not_run_batch(self):
        from forgeurl import build
        from forgeurl.core.models import Design, Issue

        calls = []

        def load(items, loader):
            calls.append(list(items))
            for item in items:
                loader(item, Issue(iid=item, project=Project(full_path="g/p")))

        design = Design(id=1, issue=BatchLoader.for_(1).batch(load))
        BatchLoader.for_(2).batch(load)

        assert calls == []
        assert build(design, only_path=True) == "/g/p/-/design_management/designs/1/raw_image"
        assert calls == [[1, 2]]
