import pytest

from blog_deploy.core.deploy_config import ConfigError, load_config, split_build_command


def test_defaults_build_with_hugo_and_push_to_origin_master(tmp_path):
    config = load_config(root=str(tmp_path), env={})

    assert config.site_root == tmp_path.resolve()
    assert config.build_command == ["./hugo"]
    assert config.output_dir == tmp_path.resolve() / "public"
    assert config.remote == "origin"
    assert config.branch == "master"
    assert config.force_add is True


def test_environment_overrides_defaults(tmp_path):
    env = {
        "BLOG_DEPLOY_BUILD_CMD": "hugo --minify",
        "BLOG_DEPLOY_THEME": "ananke",
        "BLOG_DEPLOY_OUTPUT_DIR": "dist",
        "BLOG_DEPLOY_REMOTE": "pages",
        "BLOG_DEPLOY_BRANCH": "main",
        "BLOG_DEPLOY_FORCE_ADD": "off",
    }

    config = load_config(root=str(tmp_path), env=env)

    assert config.build_command == ["hugo", "--minify", "-t", "ananke"]
    assert config.output_dir == tmp_path.resolve() / "dist"
    assert config.remote == "pages"
    assert config.branch == "main"
    assert config.force_add is False


def test_cli_values_win_over_environment(tmp_path):
    env = {"BLOG_DEPLOY_REMOTE": "pages", "BLOG_DEPLOY_FORCE_ADD": "no"}

    config = load_config(root=str(tmp_path), remote="upstream", force_add=True, env=env)

    assert config.remote == "upstream"
    assert config.force_add is True


def test_absolute_output_dir_is_kept(tmp_path):
    target = tmp_path / "elsewhere"
    config = load_config(root=str(tmp_path / "site"), output_dir=str(target), env={})
    assert config.output_dir == target


def test_root_falls_back_to_environment_then_cwd(tmp_path, monkeypatch):
    assert load_config(env={"BLOG_DEPLOY_ROOT": str(tmp_path)}).site_root == tmp_path.resolve()

    monkeypatch.chdir(tmp_path)
    assert load_config(env={}).site_root == tmp_path.resolve()


def test_split_build_command_keeps_quoted_arguments():
    assert split_build_command('hugo --baseURL "https://example.com/blog"') == [
        "hugo",
        "--baseURL",
        "https://example.com/blog",
    ]


@pytest.mark.parametrize(
    "kwargs, env",
    [
        ({"remote": "  "}, {}),
        ({"branch": ""}, {}),
        ({"build_command": ""}, {}),
        ({"build_command": 'hugo "unterminated'}, {}),
        ({}, {"BLOG_DEPLOY_FORCE_ADD": "maybe"}),
    ],
)
def test_invalid_values_raise_config_error(tmp_path, kwargs, env):
    with pytest.raises(ConfigError):
        load_config(root=str(tmp_path), env=env, **kwargs)


def test_explicit_env_mapping_ignores_process_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("BLOG_DEPLOY_ROOT", str(tmp_path / "from-process-env"))
    monkeypatch.chdir(tmp_path)

    assert load_config(env={}).site_root == tmp_path.resolve()
