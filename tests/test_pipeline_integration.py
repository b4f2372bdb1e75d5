"""Integration tests for the console report over the bundled network."""

from trainpaths.config import AppConfig, NetworkConfig, get_config
from trainpaths.container import Container
from trainpaths.pipeline import build_report, report_comparison, run_pipeline
from trainpaths.services import NetworkPlannerService


def test_report_comparison_on_bundled_digraph():
    report = report_comparison(get_config().network.edge_list_path)

    assert report.startswith("Testing tinyEWD.txt")
    assert "test succeeded" in report


def test_build_report_answers_every_question():
    config = AppConfig()
    planner = Container.create_default(config).resolve(NetworkPlannerService)

    sections = build_report(planner, config)

    assert len(sections) == 6
    assert "Total cost" in sections[1]
    assert "length = 395 km" in sections[2]
    assert "time = 336 min" in sections[4]
    assert all("Error" not in section for section in sections)


def test_build_report_keeps_going_after_a_failed_question(ring_config):
    # The ring network has none of the Swiss cities asked about
    config = AppConfig(network=ring_config)
    planner = Container.create_default(config).resolve(NetworkPlannerService)

    sections = build_report(planner, config)

    assert len(sections) == 5
    assert "Total cost : 12 MCHF" in sections[0]
    assert "Error: City not found: Geneve" in sections[1]


def test_run_pipeline_prints_report(capsys, ring_data_dir):
    config = AppConfig(network=NetworkConfig(data_dir=ring_data_dir))

    run_pipeline(Container.create_default(config))

    output = capsys.readouterr().out
    assert "1. Which lines should be renovated" in output
    assert "A - B : 3 MCHF" in output
