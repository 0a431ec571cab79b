"""Unit tests for source path collection."""

import logging
from dataclasses import replace

from gwtdev.reactor.graph import ProjectGraph
from gwtdev.reactor.models import ArtifactScope
from gwtdev.reactor.scopes import ScopeFilter
from gwtdev.resolve.sources import SourceCollector, collect_sources

RUNTIME = ScopeFilter.from_name("runtime")


def _collect(graph: ProjectGraph, *projects, scope_filter: ScopeFilter = RUNTIME):
    return collect_sources(list(projects), scope_filter, graph)


class TestDirectSources:
    def test_source_roots_in_order(self, make_project):
        app = make_project("app", sources=["/ws/app/src/main/java", "/ws/app/target/generated-sources"])
        graph = ProjectGraph([app])
        assert _collect(graph, app) == ["/ws/app/src/main/java", "/ws/app/target/generated-sources"]

    def test_execution_project_roots_replace_nominal(self, make_project):
        """The execution view's source roots are used instead of the nominal project's."""
        forked = make_project("app", sources=["/ws/app/src/main/java", "/ws/app/target/generated-sources/gwt"])
        app = make_project("app", sources=["/ws/app/src/main/java"], execution_project=forked)
        graph = ProjectGraph([app])
        assert _collect(graph, app) == ["/ws/app/src/main/java", "/ws/app/target/generated-sources/gwt"]

    def test_execution_project_references_followed(self, make_project, dependency_on):
        lib = make_project("lib", packaging="gwt-lib")
        forked = make_project("app", dependencies=[dependency_on(lib)], siblings=[lib])
        app = make_project("app", execution_project=forked)
        graph = ProjectGraph([app, lib])
        assert _collect(graph, app) == ["/ws/app/src/main/java", "/ws/lib/src/main/java"]


class TestTransitiveSources:
    def test_gwt_lib_sibling_included(self, make_project, dependency_on):
        lib = make_project("lib", packaging="gwt-lib")
        app = make_project("app", packaging="gwt-app", dependencies=[dependency_on(lib)], siblings=[lib])
        graph = ProjectGraph([app, lib])
        assert _collect(graph, app) == ["/ws/app/src/main/java", "/ws/lib/src/main/java"]

    def test_sources_classifier_sibling_included(self, make_project, dependency_on):
        shared = make_project("shared")
        app = make_project(
            "app",
            dependencies=[dependency_on(shared, type="jar", classifier="sources")],
            siblings=[shared],
        )
        graph = ProjectGraph([app, shared])
        assert _collect(graph, app) == ["/ws/app/src/main/java", "/ws/shared/src/main/java"]

    def test_plain_jar_sibling_excluded(self, make_project, dependency_on, caplog):
        """A plain jar dependency without the sources classifier adds no sources."""
        shared = make_project("shared")
        app = make_project("app", dependencies=[dependency_on(shared, type="jar")], siblings=[shared])
        graph = ProjectGraph([app, shared])
        with caplog.at_level(logging.DEBUG, logger="gwtdev"):
            assert _collect(graph, app) == ["/ws/app/src/main/java"]
        assert "neither a gwt-lib or jar:sources" in caplog.text

    def test_external_gwt_lib_without_reference_skipped(self, make_project, make_artifact, caplog):
        external = make_artifact("gwt-widgets", group_id="org.external", type="gwt-lib")
        app = make_project("app", dependencies=[external])
        graph = ProjectGraph([app])
        with caplog.at_level(logging.DEBUG, logger="gwtdev"):
            assert _collect(graph, app) == ["/ws/app/src/main/java"]
        assert "no corresponding project reference" in caplog.text

    def test_scope_filtered_dependency_not_followed(self, make_project, dependency_on):
        """A test-scoped gwt-lib is not followed under the runtime filter."""
        lib = make_project("lib", packaging="gwt-lib")
        app = make_project("app", dependencies=[dependency_on(lib, scope=ArtifactScope.TEST)], siblings=[lib])
        graph = ProjectGraph([app, lib])
        assert _collect(graph, app) == ["/ws/app/src/main/java"]
        assert _collect(graph, app, scope_filter=ScopeFilter.from_name("test")) == [
            "/ws/app/src/main/java",
            "/ws/lib/src/main/java",
        ]

    def test_dependency_not_on_classpath_not_followed(self, make_project, dependency_on):
        lib = make_project("lib", packaging="gwt-lib")
        app = make_project("app", dependencies=[dependency_on(lib, added_to_classpath=False)], siblings=[lib])
        graph = ProjectGraph([app, lib])
        assert _collect(graph, app) == ["/ws/app/src/main/java"]

    def test_unresolved_artifact_file_is_not_an_error(self, make_project, dependency_on):
        lib = make_project("lib", packaging="gwt-lib")
        app = make_project("app", dependencies=[dependency_on(lib, file=None)], siblings=[lib])
        graph = ProjectGraph([app, lib])
        assert _collect(graph, app) == ["/ws/app/src/main/java", "/ws/lib/src/main/java"]

    def test_depth_first_order(self, make_project, dependency_on):
        """Sources follow a depth-first walk of the references."""
        leaf = make_project("leaf", packaging="gwt-lib")
        mid = make_project("mid", packaging="gwt-lib", dependencies=[dependency_on(leaf)], siblings=[leaf])
        other = make_project("other", packaging="gwt-lib")
        app = make_project(
            "app",
            dependencies=[dependency_on(mid), dependency_on(other)],
            siblings=[mid, other],
        )
        graph = ProjectGraph([app, mid, leaf, other])
        assert _collect(graph, app) == [
            "/ws/app/src/main/java",
            "/ws/mid/src/main/java",
            "/ws/leaf/src/main/java",
            "/ws/other/src/main/java",
        ]


class TestDeduplication:
    def test_diamond_yields_each_root_once(self, make_project, dependency_on):
        base = make_project("base", packaging="gwt-lib")
        left = make_project("left", packaging="gwt-lib", dependencies=[dependency_on(base)], siblings=[base])
        right = make_project("right", packaging="gwt-lib", dependencies=[dependency_on(base)], siblings=[base])
        app = make_project("app", dependencies=[dependency_on(left), dependency_on(right)], siblings=[left, right])
        graph = ProjectGraph([app, left, right, base])
        sources = _collect(graph, app)
        assert sources == [
            "/ws/app/src/main/java",
            "/ws/left/src/main/java",
            "/ws/base/src/main/java",
            "/ws/right/src/main/java",
        ]
        assert len(sources) == len(set(sources))

    def test_cycle_terminates(self, make_project, dependency_on):
        """Mutually referencing projects are each traversed once."""
        a_plain = make_project("a", packaging="gwt-lib")
        b = make_project("b", packaging="gwt-lib", dependencies=[dependency_on(a_plain)], siblings=[a_plain])
        a = make_project("a", packaging="gwt-lib", dependencies=[dependency_on(b)], siblings=[b])
        graph = ProjectGraph([a, b])
        assert _collect(graph, a) == ["/ws/a/src/main/java", "/ws/b/src/main/java"]

    def test_self_reference_terminates(self, make_project, dependency_on):
        plain = make_project("self", packaging="gwt-lib")
        looped = make_project("self", packaging="gwt-lib", dependencies=[dependency_on(plain)], siblings=[plain])
        graph = ProjectGraph([looped])
        assert _collect(graph, looped) == ["/ws/self/src/main/java"]

    def test_shared_source_root_listed_once(self, make_project, dependency_on):
        lib = make_project("lib", packaging="gwt-lib", sources=["/ws/shared/src", "/ws/lib/src"])
        app = make_project("app", sources=["/ws/shared/src"], dependencies=[dependency_on(lib)], siblings=[lib])
        graph = ProjectGraph([app, lib])
        assert _collect(graph, app) == ["/ws/shared/src", "/ws/lib/src"]

    def test_selected_projects_share_dependency(self, make_project, dependency_on):
        lib = make_project("lib", packaging="gwt-lib")
        app1 = make_project("app1", packaging="gwt-app", dependencies=[dependency_on(lib)], siblings=[lib])
        app2 = make_project("app2", packaging="gwt-app", dependencies=[dependency_on(lib)], siblings=[lib])
        graph = ProjectGraph([app1, app2, lib])
        assert _collect(graph, app1, app2) == [
            "/ws/app1/src/main/java",
            "/ws/lib/src/main/java",
            "/ws/app2/src/main/java",
        ]


def test_collector_accumulates_across_calls(make_project):
    a = make_project("a")
    b = replace(make_project("b"), compile_source_roots=("/ws/b/src",))
    collector = SourceCollector(ProjectGraph([a, b]), RUNTIME)
    collector.add_sources(a)
    collector.add_sources(b)
    collector.add_sources(a)
    assert collector.sources == ["/ws/a/src/main/java", "/ws/b/src"]
