"""Run configuration shared by every chunk of a generation run."""

from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from tpcdsgen.errors import GenerationError, InvalidOptionError
from tpcdsgen.generation.scaling import Scaling, MAX_SCALE
from tpcdsgen.schema.table import Table

DEFAULT_SCALE = 1.0
DEFAULT_DIRECTORY = "."
DEFAULT_SUFFIX = ".dat"
DEFAULT_NULL_STRING = ""
DEFAULT_SEPARATOR = "|"
DEFAULT_DO_NOT_TERMINATE = False
DEFAULT_NO_SEXISM = False
DEFAULT_PARALLELISM = 1
DEFAULT_OVERWRITE = False


class Session(BaseModel):
    """
    Immutable run configuration.

    Derived copies are produced with the ``with_*`` methods; a session is never
    modified in place, so one instance can be handed to every chunk.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    scale: float = DEFAULT_SCALE
    target_directory: str = DEFAULT_DIRECTORY
    suffix: str = DEFAULT_SUFFIX
    table: Optional[Table] = None
    null_string: str = DEFAULT_NULL_STRING
    separator: str = DEFAULT_SEPARATOR
    do_not_terminate: bool = DEFAULT_DO_NOT_TERMINATE
    no_sexism: bool = DEFAULT_NO_SEXISM
    parallelism: int = DEFAULT_PARALLELISM
    chunk_number: int = 1
    overwrite: bool = DEFAULT_OVERWRITE

    @field_validator("table", mode="before")
    @classmethod
    def _parse_table(cls, value):
        if value is None or isinstance(value, Table):
            return value
        return Table.from_name(str(value))

    @model_validator(mode="after")
    def _check_options(self) -> "Session":
        if not 0 < self.scale <= MAX_SCALE:
            raise InvalidOptionError("scale", self.scale, f"Scale must be greater than 0 and at most {MAX_SCALE}")
        if len(self.separator) != 1:
            raise InvalidOptionError("separator", self.separator, "Separator must be a single character")
        if self.parallelism < 1:
            raise InvalidOptionError("parallelism", self.parallelism, "Parallelism must be at least 1")
        if not 1 <= self.chunk_number <= self.parallelism:
            raise InvalidOptionError(
                "chunk number", self.chunk_number, f"Chunk number must be between 1 and {self.parallelism}"
            )
        return self

    def with_table(self, table: Table) -> "Session":
        return self._copy_with(table=table)

    def with_scale(self, scale: float) -> "Session":
        return self._copy_with(scale=scale)

    def with_parallelism(self, parallelism: int) -> "Session":
        return self._copy_with(parallelism=parallelism)

    def with_chunk_number(self, chunk_number: int) -> "Session":
        return self._copy_with(chunk_number=chunk_number)

    def with_no_sexism(self, no_sexism: bool) -> "Session":
        return self._copy_with(no_sexism=no_sexism)

    def _copy_with(self, **changes) -> "Session":
        # model_copy skips validation, so rebuild through the constructor
        return Session(**{**self.model_dump(), **changes})

    @property
    def scaling(self) -> Scaling:
        return Scaling(self.scale)

    def generate_only_one_table(self) -> bool:
        return self.table is not None

    def get_only_table_to_generate(self) -> Table:
        if self.table is None:
            raise GenerationError("table not present")
        return self.table

    def terminate_rows_with_separator(self) -> bool:
        return not self.do_not_terminate

    def is_sexist(self) -> bool:
        return not self.no_sexism

    def command_line_arguments(self) -> str:
        """Render the options that differ from the defaults as CLI flags."""
        output: List[str] = []
        if self.scale != DEFAULT_SCALE:
            output.append(f"--scale {self.scale:g}")
        if self.target_directory != DEFAULT_DIRECTORY:
            output.append(f"--directory {self.target_directory}")
        if self.suffix != DEFAULT_SUFFIX:
            output.append(f"--suffix {self.suffix}")
        if self.table is not None:
            output.append(f"--table {self.table.table_name}")
        if self.null_string != DEFAULT_NULL_STRING:
            output.append(f"--null {self.null_string}")
        if self.separator != DEFAULT_SEPARATOR:
            output.append(f"--separator {self.separator}")
        if self.do_not_terminate != DEFAULT_DO_NOT_TERMINATE:
            output.append("--do-not-terminate")
        if self.no_sexism != DEFAULT_NO_SEXISM:
            output.append("--no-sexism")
        if self.parallelism != DEFAULT_PARALLELISM:
            output.append(f"--parallelism {self.parallelism}")
        if self.overwrite != DEFAULT_OVERWRITE:
            output.append("--overwrite")
        return " ".join(output)

    @property
    def target_path(self) -> Path:
        return Path(self.target_directory)


def get_default_session() -> Session:
    """Session with every option at its default value."""
    return Session()
