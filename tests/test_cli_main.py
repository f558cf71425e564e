from blog_deploy.cli.main import CONFIG_ERROR_EXIT_CODE, INTERRUPTED_EXIT_CODE, main
from blog_deploy.domain.models import DeployResult, DeployStep, StepResult


def _result(message, failed_at=None, returncode=0):
    steps = []
    for step in DeployStep:
        if step is failed_at:
            steps.append(StepResult(step, False, returncode, "unknown"))
            break
        steps.append(StepResult(step, True))
    return DeployResult(message=message, steps=steps)


def test_main_passes_message_words_and_config(monkeypatch, tmp_path):
    seen = {}

    def fake_run_deploy(config, words, step_cb=None):
        seen["config"] = config
        seen["words"] = list(words)
        return _result(" ".join(words))

    monkeypatch.setattr("blog_deploy.cli.main.run_deploy", fake_run_deploy)

    exit_code = main(["--root", str(tmp_path), "-b", "main", "--no-force", "Fix", "typo"])

    assert exit_code == 0
    assert seen["words"] == ["Fix", "typo"]
    assert seen["config"].branch == "main"
    assert seen["config"].force_add is False
    assert seen["config"].output_dir == tmp_path.resolve() / "public"


def test_main_returns_failing_step_exit_code(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(
        "blog_deploy.cli.main.run_deploy",
        lambda config, words, step_cb=None: _result("msg", failed_at=DeployStep.PUSH, returncode=128),
    )

    assert main(["--root", str(tmp_path), "msg"]) == 128
    assert "push" in capsys.readouterr().err


def test_main_prints_banner(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("blog_deploy.cli.main.run_deploy", lambda config, words, step_cb=None: _result("msg"))

    main(["--root", str(tmp_path)])

    assert "Deploying updates to GitHub..." in capsys.readouterr().out


def test_main_rejects_invalid_config(tmp_path):
    assert main(["--root", str(tmp_path), "-r", " "]) == CONFIG_ERROR_EXIT_CODE


def test_main_handles_interrupt(monkeypatch, tmp_path):
    def interrupted(config, words, step_cb=None):
        raise KeyboardInterrupt

    monkeypatch.setattr("blog_deploy.cli.main.run_deploy", interrupted)

    assert main(["--root", str(tmp_path)]) == INTERRUPTED_EXIT_CODE


def test_message_words_may_surround_options(monkeypatch, tmp_path):
    seen = {}

    def fake_run_deploy(config, words, step_cb=None):
        seen["config"] = config
        seen["words"] = list(words)
        return _result(" ".join(words))

    monkeypatch.setattr("blog_deploy.cli.main.run_deploy", fake_run_deploy)

    exit_code = main(["--root", str(tmp_path), "Add", "-t", "tag", "page", "-b", "main"])

    assert exit_code == 0
    assert seen["words"] == ["Add", "page"]
    assert seen["config"].build_command == ["./hugo", "-t", "tag"]
    assert seen["config"].branch == "main"


def test_main_reports_progress_for_each_step(monkeypatch, tmp_path, capsys):
    def fake_run_deploy(config, words, step_cb=None):
        result = _result("msg", failed_at=DeployStep.COMMIT, returncode=1)
        for outcome in result.steps:
            step_cb(outcome)
        return result

    monkeypatch.setattr("blog_deploy.cli.main.run_deploy", fake_run_deploy)

    assert main(["--root", str(tmp_path), "msg"]) == 1

    out = capsys.readouterr().out
    assert "进度 1/5: build 完成" in out
    assert "进度 4/5: commit 失败" in out
    assert "已完成步骤: build, enter_output_dir, stage" in out
