"""Generation of one table chunk into its output sinks."""

import time
from typing import Callable, Dict

from tpcdsgen.config.logging import get_logger
from tpcdsgen.errors import ConfigurationError
from tpcdsgen.generation.constants import PROGRESS_LOG_INTERVAL_SECONDS
from tpcdsgen.generation.error_logging import log_error
from tpcdsgen.schema.table import Table
from .chunks import split_work
from .results import Results
from .writer import FileSink, format_row

logger = get_logger(__name__)

SinkFactory = Callable[[Table, object], FileSink]


class TableGenerator:
    """
    Write the rows of one chunk of a table.

    Args:
        session: Run configuration; its chunk number selects the rows
        sink_factory: Opens the output sink of a table, ``FileSink.for_table`` by default
    """

    def __init__(self, session, sink_factory: SinkFactory = FileSink.for_table):
        self.session = session
        self.sink_factory = sink_factory

    def generate_table(self, table: Table) -> Dict[Table, int]:
        """
        Generate ``table`` for this chunk.

        Returns:
            Rows written per output table (the child table included when it is
            generated alongside its parent)
        """
        session = self.session
        if table.is_child() and not session.generate_only_one_table():
            logger.debug(f"Skipping {table.table_name}; it is generated with {table.parent.table_name}")
            return {}
        if not table.has_generator():
            raise ConfigurationError(
                f"Table {table.table_name} is reference-only and cannot be generated", table=table.table_name
            )

        boundaries = split_work(table, session)
        if boundaries.is_empty():
            logger.debug(f"Chunk {session.chunk_number} has no rows of {table.table_name}")
            return {}

        output_tables = [table]
        if table.has_child() and not session.generate_only_one_table():
            output_tables.append(table.child)

        logger.info(
            f"Generating {table.table_name} chunk {session.chunk_number}/{session.parallelism}: "
            f"rows {boundaries.first_row:,}-{boundaries.last_row:,}"
        )
        start = time.time()
        last_progress = start
        counts = {output_table: 0 for output_table in output_tables}
        sinks = {}
        try:
            for output_table in output_tables:
                sinks[output_table] = self.sink_factory(output_table, session)
            for output_table, values in Results(table, boundaries, session):
                sinks[output_table].write(format_row(values, session))
                counts[output_table] += 1
                if time.time() - last_progress >= PROGRESS_LOG_INTERVAL_SECONDS:
                    last_progress = time.time()
                    logger.info(f"  {table.table_name} chunk {session.chunk_number}: {counts[table]:,} rows written")
        except Exception as e:
            log_error(
                error=e,
                context={"first_row": boundaries.first_row, "last_row": boundaries.last_row},
                operation="table generation",
                table_name=table.table_name,
                chunk_num=session.chunk_number,
            )
            raise
        finally:
            for sink in sinks.values():
                sink.close()

        elapsed = time.time() - start
        summary = ", ".join(f"{t.table_name}={count:,}" for t, count in counts.items())
        logger.info(f"Finished {table.table_name} chunk {session.chunk_number} in {elapsed:.3f}s ({summary} rows)")
        return counts
