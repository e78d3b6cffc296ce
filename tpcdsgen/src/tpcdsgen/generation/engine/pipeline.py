"""Local multi-chunk generation run."""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional

from tpcdsgen.config.logging import get_logger
from tpcdsgen.errors import ConfigurationError
from tpcdsgen.generation.distributions import preload_distributions
from tpcdsgen.schema.table import Table
from .driver import SinkFactory, TableGenerator
from .writer import FileSink

logger = get_logger(__name__)


def tables_to_generate(session) -> List[Table]:
    if session.generate_only_one_table():
        table = session.get_only_table_to_generate()
        if not table.has_generator():
            raise ConfigurationError(
                f"Table {table.table_name} is reference-only and cannot be generated", table=table.table_name
            )
        return [table]
    return Table.get_base_tables()


def _generate_chunk(session, tables: List[Table], sink_factory: SinkFactory) -> Dict[Table, int]:
    generator = TableGenerator(session, sink_factory)
    counts: Dict[Table, int] = {}
    for table in tables:
        for output_table, count in generator.generate_table(table).items():
            counts[output_table] = counts.get(output_table, 0) + count
    return counts


def generate_data(
    session,
    chunk_numbers: Optional[Iterable[int]] = None,
    sink_factory: SinkFactory = FileSink.for_table,
    max_workers: Optional[int] = None,
) -> Dict[Table, int]:
    """
    Generate every requested table for the given chunks.

    Each chunk runs on its own worker thread with its own session copy and
    generators. The first failing chunk cancels the chunks not yet started
    and its error propagates.

    Args:
        session: Run configuration
        chunk_numbers: Chunks to run; all of ``1..parallelism`` by default
        sink_factory: Opens the output sink of a table
        max_workers: Thread pool size; one thread per chunk by default

    Returns:
        Rows written per table, summed over the chunks
    """
    tables = tables_to_generate(session)
    chunks = list(chunk_numbers) if chunk_numbers is not None else list(range(1, session.parallelism + 1))
    chunk_sessions = [session.with_chunk_number(chunk) for chunk in chunks]

    pipeline_start = time.time()
    logger.info(
        f"Starting data generation (scale={session.scale:g}, tables={len(tables)}, "
        f"chunks={chunks}, output_dir={session.target_directory})"
    )

    # Load shared lookup tables before any worker starts
    preload_distributions()

    totals: Dict[Table, int] = {}
    executor = ThreadPoolExecutor(max_workers=max_workers or max(1, len(chunk_sessions)))
    try:
        futures = {
            executor.submit(_generate_chunk, chunk_session, tables, sink_factory): chunk_session.chunk_number
            for chunk_session in chunk_sessions
        }
        for future in as_completed(futures):
            for table, count in future.result().items():
                totals[table] = totals.get(table, 0) + count
            logger.debug(f"Chunk {futures[future]} completed")
    except BaseException:
        executor.shutdown(wait=True, cancel_futures=True)
        raise
    executor.shutdown(wait=True)

    elapsed = time.time() - pipeline_start
    logger.info(
        f"Data generation completed: {sum(totals.values()):,} rows in {len(totals)} table(s) "
        f"(total time: {elapsed:.3f}s)"
    )
    return totals
