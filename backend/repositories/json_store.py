import os
from pathlib import Path
from typing import List

import orjson
from structlog.stdlib import BoundLogger

from domain.entities import Movie
from domain.interfaces import IMovieStore


class JsonFileMovieStore(IMovieStore):
    """Whole-collection JSON file store.

    Every save rewrites the full array: the data goes to ``<file>.tmp`` first
    and is then renamed over the target, so readers never see a partial file.
    Concurrent writers are not serialized; the last rename wins.
    """

    def __init__(self, path: Path, logger: BoundLogger):
        self.path = Path(path)
        self.tmp_path = self.path.with_name(self.path.name + ".tmp")
        self.logger = logger

    def load(self) -> List[Movie]:
        if not self.path.exists():
            return []
        try:
            data = orjson.loads(self.path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            self.logger.warning(
                "Data file unreadable, treating as empty", path=str(self.path), error=str(e)
            )
            return []
        if not isinstance(data, list):
            self.logger.warning("Data file is not a JSON array, treating as empty", path=str(self.path))
            return []

        movies = []
        for item in data:
            if not isinstance(item, dict):
                continue
            try:
                movies.append(Movie.from_dict(item))
            except (TypeError, ValueError) as e:
                self.logger.warning("Skipping unreadable record", record=item, error=str(e))
        return movies

    def save(self, movies: List[Movie]) -> None:
        payload = orjson.dumps([m.to_dict() for m in movies], option=orjson.OPT_INDENT_2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.tmp_path.write_bytes(payload)
        os.replace(self.tmp_path, self.path)
        self.logger.info("Collection saved", path=str(self.path), total=len(movies))
