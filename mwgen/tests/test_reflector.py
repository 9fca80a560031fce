"""Tests for the signature reflector."""

import pytest

from mwgen.core.errors import InterfaceNotFound, ParseError
from mwgen.core.reflector import (
    ImportSpec,
    Parameter,
    list_interfaces,
    reflect,
    reflect_source,
    resolve_import_path,
)
from mwgen.core.reflector.utils import list_go_files


# =========================================================================
# Sample Go source fixtures
# =========================================================================

SERVICE_GO = '''package item

import (
	"context"
)

type Item struct {
	ID   uint
	Name string
}

// Service manages items.
type Service interface {
	Add(ctx context.Context, item Item) error
	Get(ctx context.Context, id uint) (Item, error)
}
'''

TYPE_SHAPES_GO = '''package shapes

import (
	"context"

	"example.com/app/models"
	pkg "example.com/app/other"
)

type Shapes interface {
	Do(p *pkg.T, s []T, m map[string][]int, a [4]byte, items []*models.Item) (*models.Item, error)
	Call(f func(int) error, ch <-chan string, opts ...Option)
	Sum(a, b int) int
	Split(ctx context.Context) (n int, err error)
	Put(context.Context, string) error
	Skip(_ int, name string)
}
'''

EMBEDDED_GO = '''package rw

import "io"

type ReadCloser interface {
	io.Reader
	Close() error
}
'''

GROUPED_GO = '''package grouped

type (
	ID int

	Store interface {
		// Load returns the value for a key.
		Load(key string) (string, bool)
		Keys() []string
	}
)
'''

BROKEN_GO = '''package broken

func broken( {
'''


# =========================================================================
# Helpers
# =========================================================================

def _write_module(tmp_path, files):
    for name, source in files.items():
        (tmp_path / name).write_text(source, encoding="utf-8")
    return str(tmp_path)


# =========================================================================
# Tests: Example scenario
# =========================================================================

class TestServiceInterface:
    def test_methods_in_declaration_order(self, tmp_path):
        module = _write_module(tmp_path, {"service.go": SERVICE_GO})
        descriptor = reflect(module, "Service")

        assert descriptor.name == "Service"
        assert descriptor.package == "item"
        assert [m.name for m in descriptor.methods] == ["Add", "Get"]

    def test_parameters_and_returns(self, tmp_path):
        module = _write_module(tmp_path, {"service.go": SERVICE_GO})
        add, get = reflect(module, "Service").methods

        assert add.parameters == (
            Parameter(type_name="context.Context", name="ctx"),
            Parameter(type_name="Item", name="item"),
        )
        assert add.returns == ("error",)
        assert get.parameters[1] == Parameter(type_name="uint", name="id")
        assert get.returns == ("Item", "error")

    def test_imports_and_qualifiers(self, tmp_path):
        module = _write_module(tmp_path, {"service.go": SERVICE_GO})
        descriptor = reflect(module, "Service")

        assert descriptor.imports == [ImportSpec(path="context")]
        assert descriptor.qualifiers == ["context"]
        assert descriptor.resolve_import("context") == ImportSpec(path="context")


# =========================================================================
# Tests: Type rendering
# =========================================================================

class TestTypeRendering:
    def test_pointer_slice_qualified_forms(self):
        do = reflect_source(TYPE_SHAPES_GO, "Shapes").methods[0]
        assert [p.type_name for p in do.parameters] == [
            "*pkg.T",
            "[]T",
            "map[string][]int",
            "[4]byte",
            "[]*models.Item",
        ]
        assert do.returns == ("*models.Item", "error")

    def test_func_chan_and_variadic(self):
        call = reflect_source(TYPE_SHAPES_GO, "Shapes").methods[1]
        assert [p.type_name for p in call.parameters] == [
            "func(int) error",
            "<-chan string",
            "...Option",
        ]
        assert call.parameters[2].variadic
        assert call.parameters[2].call_argument == "opts..."
        assert call.returns == ()

    def test_func_type_names_are_dropped(self):
        source = '''package hooks

type Hooks interface {
	On(fn func(a, b int, rest ...string) (n int, err error), out chan<- Event)
}
'''
        on = reflect_source(source, "Hooks").methods[0]
        assert [p.type_name for p in on.parameters] == [
            "func(int, int, ...string) (int, error)",
            "chan<- Event",
        ]

    def test_grouped_parameters_are_split(self):
        total = reflect_source(TYPE_SHAPES_GO, "Shapes").methods[2]
        assert total.parameters == (
            Parameter(type_name="int", name="a"),
            Parameter(type_name="int", name="b"),
        )
        assert total.returns == ("int",)

    def test_result_names_are_dropped(self):
        split = reflect_source(TYPE_SHAPES_GO, "Shapes").methods[3]
        assert split.returns == ("int", "error")

    def test_unnamed_and_blank_parameters_get_positional_names(self):
        methods = reflect_source(TYPE_SHAPES_GO, "Shapes").methods
        put, skip = methods[4], methods[5]
        assert [(p.name, p.type_name) for p in put.parameters] == [
            ("arg0", "context.Context"),
            ("arg1", "string"),
        ]
        assert [p.name for p in skip.parameters] == ["arg0", "name"]

    def test_qualifiers_in_first_use_order(self):
        descriptor = reflect_source(TYPE_SHAPES_GO, "Shapes")
        assert descriptor.qualifiers == ["pkg", "models", "context"]
        assert descriptor.resolve_import("pkg").path == "example.com/app/other"
        assert descriptor.resolve_import("models").path == "example.com/app/models"

    def test_rendered_type_reparses_identically(self):
        original = reflect_source(TYPE_SHAPES_GO, "Shapes").methods[0]
        params = ", ".join(f"{p.name} {p.type_name}" for p in original.parameters)
        rebuilt = f"package shapes\n\ntype Again interface {{\n\tDo({params}) (*models.Item, error)\n}}\n"

        again = reflect_source(rebuilt, "Again").methods[0]
        assert again.parameters == original.parameters
        assert again.returns == original.returns


# =========================================================================
# Tests: Declaration shapes
# =========================================================================

class TestDeclarations:
    def test_embedded_interfaces_are_ignored(self):
        descriptor = reflect_source(EMBEDDED_GO, "ReadCloser")
        assert [m.name for m in descriptor.methods] == ["Close"]

    def test_parenthesized_type_group(self):
        descriptor = reflect_source(GROUPED_GO, "Store")
        assert [m.name for m in descriptor.methods] == ["Load", "Keys"]
        assert descriptor.methods[0].returns == ("string", "bool")
        assert descriptor.methods[1].returns == ("[]string",)

    def test_non_interface_type_is_not_a_match(self):
        with pytest.raises(InterfaceNotFound):
            reflect_source(GROUPED_GO, "ID")

    def test_concrete_type_with_same_name_is_skipped(self, tmp_path):
        module = _write_module(tmp_path, {
            "a.go": "package svc\n\ntype Service struct{}\n",
            "b.go": "package svc\n\ntype Service interface {\n\tPing() error\n}\n",
        })
        descriptor = reflect(module, "Service")
        assert descriptor.file_path.endswith("b.go")


# =========================================================================
# Tests: Deterministic traversal
# =========================================================================

class TestTraversal:
    def test_first_file_in_sorted_order_wins(self, tmp_path):
        module = _write_module(tmp_path, {
            "b_second.go": "package svc\n\ntype Repo interface {\n\tSecond()\n}\n",
            "a_first.go": "package svc\n\ntype Repo interface {\n\tFirst()\n}\n",
        })
        for _ in range(3):
            descriptor = reflect(module, "Repo")
            assert [m.name for m in descriptor.methods] == ["First"]

    def test_list_go_files_is_sorted_and_filtered(self, tmp_path):
        module = _write_module(tmp_path, {
            "z.go": "package svc\n",
            "a.go": "package svc\n",
            "notes.txt": "not go",
        })
        (tmp_path / "sub.go").mkdir()

        files = list_go_files(module)
        assert [f.rsplit("/", 1)[-1] for f in files] == ["a.go", "z.go"]

    def test_list_interfaces(self, tmp_path):
        module = _write_module(tmp_path, {
            "service.go": SERVICE_GO,
            "store.go": GROUPED_GO.replace("package grouped", "package item"),
        })
        assert list_interfaces(module) == ["Service", "Store"]


# =========================================================================
# Tests: Failures
# =========================================================================

class TestFailures:
    def test_missing_interface(self, tmp_path):
        module = _write_module(tmp_path, {"service.go": SERVICE_GO})
        with pytest.raises(InterfaceNotFound) as exc_info:
            reflect(module, "Repository")
        assert exc_info.value.interface_name == "Repository"

    def test_empty_directory(self, tmp_path):
        with pytest.raises(InterfaceNotFound):
            reflect(str(tmp_path), "Service")

    def test_syntax_error_is_fatal(self, tmp_path):
        module = _write_module(tmp_path, {
            "a_broken.go": BROKEN_GO,
            "service.go": SERVICE_GO,
        })
        with pytest.raises(ParseError) as exc_info:
            reflect(module, "Service")
        assert exc_info.value.file_path.endswith("a_broken.go")

    def test_broken_file_after_match_still_fails(self, tmp_path):
        module = _write_module(tmp_path, {
            "service.go": SERVICE_GO,
            "z_broken.go": BROKEN_GO,
        })
        with pytest.raises(ParseError):
            reflect(module, "Service")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ParseError):
            reflect(str(tmp_path / "nope"), "Service")


# =========================================================================
# Tests: Import paths
# =========================================================================

class TestImportPaths:
    def test_package_name_from_path(self):
        assert ImportSpec(path="github.com/google/uuid").package_name == "uuid"
        assert ImportSpec(path="github.com/go-chi/chi/v5").package_name == "chi"
        assert ImportSpec(path="gopkg.in/yaml.v3").package_name == "yaml"
        assert ImportSpec(path="example.com/x", alias="y").package_name == "y"

    def test_resolve_from_go_mod(self, tmp_path):
        (tmp_path / "go.mod").write_text("module example.com/shop\n\ngo 1.21\n")
        (tmp_path / "item").mkdir()

        assert resolve_import_path(str(tmp_path / "item")) == "example.com/shop/item"
        assert resolve_import_path(str(tmp_path)) == "example.com/shop"
