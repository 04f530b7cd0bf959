"""
Command-line interface for site_percolation.

Single input:
    percolate run input.txt              # report open sites and percolation
    percolate run input.txt 2 3          # ...plus is_full(2, 3)

Batch (directory of site files):
    percolate run-chunk --chunk-file jobs.txt --input-dir data/ --output-dir results/
    percolate aggregate --results-dir results/ --output results.csv

Config-driven:
    percolate run-config --config run.yaml [--pending-only]
    percolate status --config run.yaml
"""

import click


@click.group()
@click.version_option(package_name='site_percolation')
def cli():
    """Site Percolation - N-by-N grid connectivity via union-find."""
    pass


@cli.command('run', context_settings={'ignore_unknown_options': True})
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('row', type=int, required=False)
@click.argument('col', type=int, required=False)
def run(input_file, row, col):
    """Open every site listed in INPUT_FILE and report whether it percolates.

    If ROW and COL are given, also print whether that site is full.
    Negative ROW or COL values are accepted and reported as out of bounds.
    """
    from ..percolation.worker import run_site_file
    from ..percolation.analysis import format_report

    if (row is None) != (col is None):
        raise click.UsageError("ROW and COL must be given together")

    full_query = (row, col) if row is not None else None

    try:
        result = run_site_file(input_file, full_query=full_query)
    except (ValueError, IndexError) as e:
        raise click.ClickException(str(e))

    for line in format_report(result):
        click.echo(line)


@cli.command('run-chunk')
@click.option('--chunk-file', '-f', required=True, type=click.Path(exists=True),
              help='Chunk file with one site file path per line')
@click.option('--input-dir', '-i', required=True, type=click.Path(exists=True, file_okay=False),
              help='Base directory the chunk paths are relative to')
@click.option('--output-dir', '-o', required=True, type=click.Path(),
              help='Output directory for .result files')
@click.option('--full', 'full_query', type=(int, int), default=None,
              help='Also query is_full(ROW, COL) for each file')
def run_chunk(chunk_file, input_dir, output_dir, full_query):
    """Worker for replaying a chunk of site files (creates .result files)."""
    from ..percolation.worker import process_percolation_chunk

    process_percolation_chunk(chunk_file, input_dir, output_dir, full_query=full_query)


@cli.command('aggregate')
@click.option('--results-dir', '-r', required=True, type=click.Path(exists=True, file_okay=False),
              help='Directory containing .result files')
@click.option('--output', '-o', 'output_file', required=True, type=click.Path(),
              help='Output CSV file')
def aggregate(results_dir, output_file):
    """Aggregate .result files into a CSV."""
    from ..percolation.analysis import aggregate_result_files_to_csv

    aggregate_result_files_to_csv(results_dir, output_file)


@cli.command('run-config')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run configuration YAML')
@click.option('--pending-only', is_flag=True, default=False,
              help='Skip inputs that already have a .result file')
def run_config(config_path, pending_only):
    """Run every site file selected by a YAML config, then aggregate."""
    from ..run.manifest import RunConfig, RunManifest
    from ..percolation.worker import process_percolation_chunk
    from ..percolation.analysis import aggregate_result_files_to_csv

    try:
        config = RunConfig.from_yaml(config_path)
        manifest = RunManifest(config)
        job_list = manifest.write_job_list(pending_only=pending_only)
    except (ValueError, FileNotFoundError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Run: {config.run_name}")
    process_percolation_chunk(job_list, config.input_dir, config.results_dir,
                              full_query=config.full_query)
    aggregate_result_files_to_csv(config.results_dir, config.scores_csv)


@cli.command('status')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run configuration YAML')
def status(config_path):
    """Show how many inputs of a configured run have results."""
    from ..run.manifest import RunConfig, RunManifest

    try:
        summary = RunManifest(RunConfig.from_yaml(config_path)).summary()
    except (ValueError, FileNotFoundError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Run: {summary['run_name']}")
    click.echo(f"  {summary['completed']}/{summary['expected']} "
               f"({summary['pct']:.1f}%) complete, {summary['pending']} pending")


if __name__ == '__main__':
    cli()
