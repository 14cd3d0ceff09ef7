"""CLI entrypoint for singularity-build."""

import rich_click as click

from singularity.build.controllers import BuildCliController, BuildCommand

click.rich_click.USE_MARKDOWN = True
BUILD_CONTROLLER = BuildCliController()


@click.command()
def singularity_build() -> None:
    """Build the site in the current directory.

    Reads `content/` and `layouts/`, writes `public/`. Configured through
    environment variables: `CONCURRENCY`, `GOOGLE_ANALYTICS_ID`,
    `LOCAL_FONTS`, `MINIFY_ASSETS`, `RELEASE`, `VERBOSE`.
    """

    result = BUILD_CONTROLLER.build(BuildCommand())
    _emit_lines(result.lines)
    if not result.success:
        raise click.ClickException("Site build failed.")


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    singularity_build()
