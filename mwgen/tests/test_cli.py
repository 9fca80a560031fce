"""Tests for the command-line entry points."""

import pytest

from mwgen.__main__ import main, scaffold_main

SERVICE_GO = '''package item

import "context"

type Service interface {
	Add(ctx context.Context, name string) error
	Get(ctx context.Context, id uint) (string, error)
}
'''


@pytest.fixture
def module(tmp_path, monkeypatch):
    monkeypatch.delenv("MWGEN_CONFIG", raising=False)
    (tmp_path / "service.go").write_text(SERVICE_GO)
    return tmp_path


class TestGenerateCommand:
    def test_logging_writes_log_go(self, module):
        code = main(["--interface", "Service", "--aspect", "logging", "--dir", str(module)])
        assert code == 0
        source = (module / "middleware" / "log.go").read_text()
        assert "type logMiddleware struct" in source

    def test_tracing_writes_trace_go(self, module):
        code = main(["--interface", "Service", "--aspect", "tracing", "--dir", str(module)])
        assert code == 0
        assert (module / "middleware" / "trace.go").exists()
        assert not (module / "middleware" / "log.go").exists()

    def test_output_and_label_flags(self, module):
        code = main([
            "--interface", "Service", "--aspect", "logging", "--dir", str(module),
            "--output", "wrappers", "--label", "items",
        ])
        assert code == 0
        source = (module / "wrappers" / "log.go").read_text()
        assert "package wrappers" in source
        assert 'serviceName = "items"' in source

    def test_stdout(self, module, capsys):
        code = main(["--interface", "Service", "--aspect", "tracing", "--dir", str(module), "--stdout"])
        assert code == 0
        assert "func (m *traceMiddleware) Get(ctx context.Context, id uint) (string, error) {" in capsys.readouterr().out
        assert not (module / "middleware").exists()

    def test_config_file_is_used(self, module):
        (module / ".mwgen.yaml").write_text("output_dir: generated\n")
        assert main(["--interface", "Service", "--aspect", "logging", "--dir", str(module)]) == 0
        assert (module / "generated" / "log.go").exists()


class TestExitCodes:
    def test_empty_interface_is_usage_error(self, module):
        assert main(["--interface", "", "--aspect", "logging", "--dir", str(module)]) == 2

    def test_unknown_aspect_is_usage_error(self, module):
        assert main(["--interface", "Service", "--aspect", "metrics", "--dir", str(module)]) == 2

    def test_missing_required_flag(self, module):
        with pytest.raises(SystemExit) as exc_info:
            main(["--aspect", "logging", "--dir", str(module)])
        assert exc_info.value.code == 2

    def test_interface_not_found(self, module):
        assert main(["--interface", "Nope", "--aspect", "logging", "--dir", str(module)]) == 1
        assert not (module / "middleware").exists()

    def test_parse_error(self, module):
        (module / "broken.go").write_text("package item\n\nfunc (\n")
        assert main(["--interface", "Service", "--aspect", "logging", "--dir", str(module)]) == 1
        assert not (module / "middleware").exists()

    def test_reject_policy(self, module):
        (module / "wide.go").write_text(
            "package item\n\ntype Wide interface {\n\tStat() (int, int, error)\n}\n"
        )
        code = main([
            "--interface", "Wide", "--aspect", "logging", "--dir", str(module), "--nary", "reject",
        ])
        assert code == 1


class TestScaffoldCommand:
    def test_scaffold_then_generate(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MWGEN_CONFIG", raising=False)
        (tmp_path / "go.mod").write_text("module example.com/shop\n")

        assert scaffold_main(["--model", "Order", "--dir", str(tmp_path)]) == 0
        package_dir = tmp_path / "order"
        assert (package_dir / "service.go").exists()

        assert main(["--interface", "Service", "--aspect", "logging", "--dir", str(package_dir)]) == 0
        source = (package_dir / "middleware" / "log.go").read_text()
        assert '\t"example.com/shop/order"\n' in source
        assert "func (m *logMiddleware) Remove(ctx context.Context, id uint) error {" in source
        assert "func (m *logMiddleware) Get(ctx context.Context, id uint) (*order.Order, error) {" in source

    def test_invalid_model(self, tmp_path):
        assert scaffold_main(["--model", "order", "--dir", str(tmp_path)]) == 2

    def test_existing_files_without_force(self, tmp_path):
        assert scaffold_main(["--model", "Order", "--dir", str(tmp_path)]) == 0
        assert scaffold_main(["--model", "Order", "--dir", str(tmp_path)]) == 1
        assert scaffold_main(["--model", "Order", "--dir", str(tmp_path), "--force"]) == 0
