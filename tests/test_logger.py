from blog_deploy.infra import logger


def test_log_lines_have_level_and_go_to_the_right_stream(capsys):
    logger.log_info("building")
    logger.log_error("push failed")

    captured = capsys.readouterr()
    assert captured.out.startswith("[INFO] [")
    assert captured.out.rstrip().endswith("building")
    assert captured.err.startswith("[ERROR] [")
    assert "push failed" in captured.err
