"""Unit tests for the global package review workflow."""

from unittest.mock import MagicMock

import pytest
from nvmprune.core.nvm import NvmEnvironment
from nvmprune.core.prompt import Confirmer
from nvmprune.core.review import GlobalsReviewWorkflow
from nvmprune.models.action import ActionResult, create_remove_action
from nvmprune.operators.base import PackageOperator
from nvmprune.scanners.npm import GlobalPackageScanner
from nvmprune.utils.shell import CommandResult


def _removed(runtime, package: str) -> ActionResult:
    return ActionResult(action=create_remove_action(package, runtime.version), success=True)


@pytest.fixture
def scanner(mock_npm_ls_output: str, monkeypatch: pytest.MonkeyPatch) -> GlobalPackageScanner:
    """Real npm scanner with npm itself mocked out."""
    monkeypatch.setattr(
        "nvmprune.scanners.npm.run_command",
        MagicMock(return_value=CommandResult(stdout=mock_npm_ls_output, stderr="", returncode=0)),
    )
    return GlobalPackageScanner()


@pytest.fixture
def operator() -> MagicMock:
    """Package operator whose removals succeed."""
    mock = MagicMock(spec=PackageOperator)
    mock.remove.side_effect = _removed
    return mock


@pytest.fixture
def confirmer() -> MagicMock:
    """Confirmer mock."""
    return MagicMock(spec=Confirmer)


@pytest.fixture
def workflow(
    nvm_env: NvmEnvironment,
    scanner: GlobalPackageScanner,
    operator: MagicMock,
    confirmer: MagicMock,
) -> GlobalsReviewWorkflow:
    """Workflow wired to mocks."""
    return GlobalsReviewWorkflow(nvm_env, scanner, operator, confirmer)


class TestGlobalsReviewWorkflow:
    """Tests for GlobalsReviewWorkflow.run()."""

    def test_npm_is_never_offered(
        self,
        workflow: GlobalsReviewWorkflow,
        confirmer: MagicMock,
        operator: MagicMock,
        install_versions,
    ) -> None:
        """Only non-npm packages are offered for removal."""
        install_versions("18.2.0")
        confirmer.confirm.return_value = False

        results = workflow.run(["18.2.0"])

        prompts = [call.args[0] for call in confirmer.confirm.call_args_list]
        assert prompts == [
            "Remove global package 'corepack' from v18.2.0? [y/N] ",
            "Remove global package 'typescript' from v18.2.0? [y/N] ",
        ]
        assert results == []
        operator.remove.assert_not_called()

    def test_removes_accepted_packages(
        self,
        workflow: GlobalsReviewWorkflow,
        confirmer: MagicMock,
        operator: MagicMock,
        install_versions,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Accepted packages are removed from the reviewed runtime."""
        install_versions("18.2.0")
        confirmer.confirm.side_effect = [False, True]

        results = workflow.run(["18.2.0"])

        assert len(results) == 1
        runtime, package = operator.remove.call_args.args
        assert runtime.version == "18.2.0"
        assert package == "typescript"
        assert "Keeping corepack" in capsys.readouterr().out

    def test_failure_continues(
        self,
        workflow: GlobalsReviewWorkflow,
        confirmer: MagicMock,
        operator: MagicMock,
        install_versions,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A failed removal is reported and the loop goes on."""
        install_versions("18.2.0")
        confirmer.confirm.return_value = True
        operator.remove.side_effect = [
            ActionResult(
                action=create_remove_action("corepack", "18.2.0"), success=False, error="EACCES"
            ),
            ActionResult(action=create_remove_action("typescript", "18.2.0"), success=True),
        ]

        results = workflow.run(["18.2.0"])

        assert [r.success for r in results] == [False, True]
        assert "Failed to remove corepack (continuing)." in capsys.readouterr().err

    def test_reviews_every_version(
        self,
        workflow: GlobalsReviewWorkflow,
        confirmer: MagicMock,
        install_versions,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Every remaining version gets its own review."""
        install_versions("14.2.1", "18.2.0")
        confirmer.confirm.return_value = False

        workflow.run(["14.2.1", "18.2.0"])

        out = capsys.readouterr().out
        assert "Global npm review for v14.2.1" in out
        assert "Global npm review for v18.2.0" in out
        assert confirmer.confirm.call_count == 4

    def test_no_globals(
        self,
        workflow: GlobalsReviewWorkflow,
        confirmer: MagicMock,
        install_versions,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A version with only npm reports no global packages."""
        install_versions("18.2.0")
        monkeypatch.setattr(
            "nvmprune.scanners.npm.run_command",
            MagicMock(
                return_value=CommandResult(
                    stdout='{"dependencies": {"npm": {"version": "9.6.7"}}}',
                    stderr="",
                    returncode=0,
                )
            ),
        )

        assert workflow.run(["18.2.0"]) == []
        confirmer.confirm.assert_not_called()
        assert "No global packages (besides npm)." in capsys.readouterr().out

    def test_missing_version_is_skipped(
        self,
        workflow: GlobalsReviewWorkflow,
        confirmer: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A version gone from disk is skipped with a warning."""
        assert workflow.run(["16.3.0"]) == []
        confirmer.confirm.assert_not_called()
        assert "Skipping" in capsys.readouterr().err

    def test_runtime_without_npm_is_skipped(
        self,
        workflow: GlobalsReviewWorkflow,
        confirmer: MagicMock,
        install_versions,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A runtime without an npm executable is skipped."""
        install_versions("18.2.0", with_npm=False)

        assert workflow.run(["18.2.0"]) == []
        confirmer.confirm.assert_not_called()
        assert "npm not found for v18.2.0" in capsys.readouterr().err
