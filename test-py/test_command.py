import json
import pathlib
import shutil
import subprocess
import sys

import pytest

from ivgicons.__main__ import main, makeArgumentParser

dataDir = pathlib.Path(__file__).resolve().parent / "data" / "mdicons"


def test_command(tmp_path, capsys):
    outputPath = tmp_path / "icons.json"
    exitCode = main([str(dataDir), "--output", str(outputPath)])
    assert exitCode == 0

    summary = capsys.readouterr().out
    assert "SVG bytes in 5 files converted to" in summary
    assert "Skipped 1 files and 1 paths." in summary
    assert "FAILURES:" in summary
    assert "broken/ic_truncated_24px.svg: " in summary

    jsonData = json.loads(outputPath.read_text(encoding="utf-8"))
    assert len(jsonData["icons"]) == 5
    assert jsonData["totals"]["fileCount"] == 5


def test_commandFailFast(tmp_path):
    exitCode = main([str(dataDir), "--fail-fast", "--output", str(tmp_path / "x")])
    assert exitCode == 1
    assert not (tmp_path / "x").exists()


def test_commandNoIconsConverted(tmp_path):
    iconsDir = tmp_path / "icons"
    shutil.copytree(dataDir / "broken", iconsDir / "broken")
    assert main([str(iconsDir)]) == 1


def test_commandConfigError(tmp_path):
    configPath = tmp_path / "config.yaml"
    configPath.write_text("targetSize: -1\n", encoding="utf-8")
    assert main([str(dataDir), "--config", str(configPath)]) == 2


def test_commandConfig(tmp_path):
    configPath = tmp_path / "config.yaml"
    configPath.write_text("nativeSizes: [24]\n", encoding="utf-8")
    outputPath = tmp_path / "icons.json"
    exitCode = main(
        [
            str(dataDir),
            "--config",
            str(configPath),
            "--num-tasks",
            "3",
            "--svg-paths",
            "--output",
            str(outputPath),
        ]
    )
    assert exitCode == 0
    jsonData = json.loads(outputPath.read_text(encoding="utf-8"))
    assert [icon["name"] for icon in jsonData["icons"]] == [
        "action/ic_3d_rotation_24px.svg",
        "toggle/ic_radio_button_checked_24px.svg",
    ]
    assert all(icon["svgPath"] for icon in jsonData["icons"])


@pytest.mark.parametrize(
    "arguments",
    [
        ["does-not-exist"],
        [str(dataDir), "--num-tasks", "0"],
        [str(dataDir), "--logging-level", "LOUD"],
    ],
)
def test_commandBadArguments(arguments):
    with pytest.raises(SystemExit):
        makeArgumentParser().parse_args(arguments)


def test_commandSubprocess(tmp_path):
    outputPath = tmp_path / "icons.json"
    completed = subprocess.run(
        [sys.executable, "-m", "ivgicons", dataDir, "--output", outputPath],
        capture_output=True,
        text=True,
    )
    assert completed.returncode == 0, completed.stderr
    assert "FAILURES:" in completed.stdout
    assert outputPath.exists()
