"""Entry point delegating to the ranking pipeline CLI."""

from vrp_ranking.glue.pipeline import main as pipeline_main


def main() -> None:
    pipeline_main()


if __name__ == "__main__":
    main()
