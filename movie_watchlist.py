#!/usr/bin/env python3
"""
Movie Watchlist (CLI)
Python 3.10+

Implements:
  1) Print watchlist
  2) Show duration
  3) Search by title
  4) Move a movie up
  5) Move a movie down
  6) Remove a movie (returns it to the library)
  7) Save watchlist
  8) Load watchlist
  9) Go to movie library (view, search, add to watchlist)
 10) Quit

Data & Parsing Rules:
- Movie files hold three lines per movie:  title / genre / duration (hours, two decimals)
  * No record count and no separator; end of file ends the list.
  * Title and genre are required and may hold at most 34 characters each.
  * Abort the whole load (no partial list) if any movie fails those checks.
  * Duration is parsed leniently: the leading number is used, trailing text is ignored,
    and a line with no leading number reads as 0.00.
  * Blank lines at the end of the file are ignored.
- Saved files use the same layout, with no newline after the last duration.

Lists:
- Library and watchlist are ordered lists of movies; order only changes through
  insert / append / remove / move-up / move-down.
- Every movie carries a stable handle (movie_id). Removal and membership act on that
  handle, so two movies with the same title stay distinct.
- Moving a movie between the library and the watchlist relocates the same movie
  object; nothing is copied.

CLI:
- Usage: movie_watchlist.py LIBRARY_FILE
- Numeric menu inputs may include a trailing period like "1." (treated as 1).
- 'q'/'Q' at any numeric prompt quits.
- Exit status is 0 on normal completion, otherwise an errno value describing why the
  library could not be loaded (or E2BIG for a wrong argument count).
"""

from __future__ import annotations

import errno
import itertools
import re
import sys
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

# =========================
# Settings
# =========================

MAX_TITLE_LENGTH = 34
MAX_GENRE_LENGTH = 34
DURATION_FORMAT = "{:.2f}"
PAGE_BREAK_WIDTH = 92

# Loading animation; set SPINNER_CYCLES to 0 to disable it.
SPINNER_CYCLES = 10
SPINNER_DELAY = 0.06

UP = "up"
DOWN = "down"


# =========================
# Errors
# =========================

class WatchlistError(Exception):
    """Base class for every failure reported by the watchlist engine."""
    exit_code = errno.EINVAL


class InvalidArgumentError(WatchlistError, ValueError):
    """A required input is missing, or a movie is not where the caller says it is."""
    exit_code = errno.EINVAL


class OutOfRangeError(WatchlistError, IndexError):
    """A field is too long, or a position lies beyond the end of a list."""
    exit_code = errno.ERANGE


class MovieNotFoundError(WatchlistError, LookupError):
    """No movie with the requested title exists in the list."""
    exit_code = errno.ENOENT


class NotFoundError(WatchlistError, FileNotFoundError):
    """A movie file could not be found."""
    exit_code = errno.ENOENT


class StorageError(WatchlistError, OSError):
    """A movie file could not be opened, read, or written."""
    exit_code = errno.EIO


class LoadError(WatchlistError):
    """Raised when a load operation must be aborted because a movie could not be built."""

    def __init__(self, message: str, line_no: Optional[int] = None, exit_code: Optional[int] = None):
        super().__init__(message)
        self.line_no = line_no
        if exit_code is not None:
            self.exit_code = exit_code


# =========================
# Movie record
# =========================

_movie_ids = itertools.count(1)


def _next_movie_id() -> int:
    return next(_movie_ids)


@dataclass(frozen=True)
class Movie:
    """
    A single movie. Equality compares the fields; identity is the movie_id handle,
    which is assigned once at construction and never reused.

    Raises InvalidArgumentError for a missing title/genre and OutOfRangeError for
    a title or genre longer than the field limits. Duration is stored as given.
    """
    title: str
    genre: str
    duration: float  # hours
    movie_id: int = field(default_factory=_next_movie_id, init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.title or not self.genre:
            raise InvalidArgumentError("A movie needs both a title and a genre.")
        if len(self.title) > MAX_TITLE_LENGTH:
            raise OutOfRangeError(f"Title is longer than {MAX_TITLE_LENGTH} characters: {self.title!r}")
        if len(self.genre) > MAX_GENRE_LENGTH:
            raise OutOfRangeError(f"Genre is longer than {MAX_GENRE_LENGTH} characters: {self.genre!r}")


def create_movie(title: Optional[str], genre: Optional[str], duration: float) -> Movie:
    """
    Build a Movie from raw field values, coercing duration to float.
    Negative or non-finite durations are accepted unchanged.
    """
    try:
        hours = float(duration)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Duration must be a number of hours, got {duration!r}.") from None
    return Movie(title, genre, hours)  # type: ignore[arg-type]


def format_movie(movie: Movie) -> str:
    """Display form used by the menus: Title (Genre, 2.50 hours)."""
    return f"{movie.title} ({movie.genre}, {DURATION_FORMAT.format(movie.duration)} hours)"


# =========================
# Ordered movie list
# =========================

@dataclass
class _Node:
    movie: Movie
    prev: Optional[int] = None
    next: Optional[int] = None


class MovieList:
    """
    Ordered list of movies.

    Nodes live in a dict keyed by movie_id and are chained through prev/next handles,
    so splicing (insert, remove, swap) never has to copy or shift the other movies.
    Positions are zero-based.
    """

    def __init__(self) -> None:
        self._nodes: Dict[int, _Node] = {}
        self._head: Optional[int] = None
        self._tail: Optional[int] = None

    @classmethod
    def from_iterable(cls, movies: Iterable[Movie]) -> "MovieList":
        result = cls()
        for movie in movies:
            result.append(movie)
        return result

    # --- Size / iteration ---

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Movie]:
        for _, node in self._walk():
            yield node.movie

    def __contains__(self, movie: object) -> bool:
        return isinstance(movie, Movie) and movie.movie_id in self._nodes

    def __repr__(self) -> str:
        return f"MovieList({self.titles()!r})"

    def titles(self) -> List[str]:
        return [movie.title for movie in self]

    # --- Insertion ---

    def insert(self, movie: Movie, position: int) -> None:
        """
        Insert movie before the element currently at position (0 = new head).
        position == len(self) appends.
        Raises OutOfRangeError for a position outside 0..len(self), and
        InvalidArgumentError for a missing movie or one already in this list.
        """
        self._check_insertable(movie)
        if position < 0 or position > len(self):
            raise OutOfRangeError(f"Position {position} is outside 0..{len(self)}.")
        if position == len(self):
            self._link_last(movie)
            return
        self._link_before(self._handle_at(position), movie)

    def append(self, movie: Movie) -> None:
        """Insert movie at the tail."""
        self._check_insertable(movie)
        self._link_last(movie)

    # --- Removal ---

    def remove(self, movie: Movie) -> Movie:
        """
        Detach movie (matched by identity) and return it so it can be placed elsewhere.
        Raises InvalidArgumentError if the list is empty or the movie is not in it.
        """
        if not self._nodes:
            raise InvalidArgumentError("Cannot remove from an empty list.")
        if not isinstance(movie, Movie):
            raise InvalidArgumentError(f"Expected a movie, got {movie!r}.")
        if movie.movie_id not in self._nodes:
            raise InvalidArgumentError(f"{movie.title} is not in this list.")
        return self._unlink(movie.movie_id).movie

    def delete(self, movie: Movie) -> None:
        """Remove movie and release it; the caller gets nothing back."""
        self.remove(movie)

    def clear(self) -> None:
        """
        Release every movie.
        Raises InvalidArgumentError if the list is already empty.
        """
        if not self._nodes:
            raise InvalidArgumentError("The list is already empty.")
        self._nodes.clear()
        self._head = None
        self._tail = None

    # --- Queries ---

    def search_by_title(self, title: str) -> Optional[Movie]:
        """
        First movie whose title matches exactly (case-sensitive), or None.
        """
        if title is None:
            raise InvalidArgumentError("A title is required to search.")
        for movie in self:
            if movie.title == title:
                return movie
        return None

    def position_of(self, title: str) -> int:
        """Zero-based position of the first movie titled title, or -1."""
        if title is None:
            raise InvalidArgumentError("A title is required to search.")
        for index, movie in enumerate(self):
            if movie.title == title:
                return index
        return -1

    def total_duration(self) -> float:
        return sum((movie.duration for movie in self), 0.0)

    # --- Reordering ---

    def move(self, title: str, direction: str) -> bool:
        """
        Swap the first movie titled title with its predecessor (UP) or successor (DOWN).

        Returns True if the order changed. Moving the head up or the tail down
        leaves the list untouched and returns False.
        Raises MovieNotFoundError if no movie has that title.
        """
        if direction not in (UP, DOWN):
            raise InvalidArgumentError(f"Unknown direction {direction!r}; expected {UP!r} or {DOWN!r}.")
        handle = self._handle_of(title)
        if handle is None:
            raise MovieNotFoundError(f"{title} not found.")
        node = self._nodes[handle]
        if direction == UP:
            if node.prev is None:
                return False
            self._swap_with_next(node.prev)
        else:
            if node.next is None:
                return False
            self._swap_with_next(handle)
        return True

    def move_up(self, title: str) -> bool:
        return self.move(title, UP)

    def move_down(self, title: str) -> bool:
        return self.move(title, DOWN)

    # --- Internal helpers ---

    def _walk(self) -> Iterator[Tuple[int, _Node]]:
        handle = self._head
        while handle is not None:
            node = self._nodes[handle]
            yield handle, node
            handle = node.next

    def _check_insertable(self, movie: Movie) -> None:
        if not isinstance(movie, Movie):
            raise InvalidArgumentError(f"Expected a movie, got {movie!r}.")
        if movie.movie_id in self._nodes:
            raise InvalidArgumentError(f"{movie.title} is already in this list.")

    def _handle_at(self, position: int) -> int:
        for index, (handle, _) in enumerate(self._walk()):
            if index == position:
                return handle
        raise OutOfRangeError(f"Position {position} is outside 0..{len(self)}.")

    def _handle_of(self, title: str) -> Optional[int]:
        if title is None:
            raise InvalidArgumentError("A title is required to search.")
        for handle, node in self._walk():
            if node.movie.title == title:
                return handle
        return None

    def _link_last(self, movie: Movie) -> None:
        handle = movie.movie_id
        self._nodes[handle] = _Node(movie, prev=self._tail)
        if self._tail is None:
            self._head = handle
        else:
            self._nodes[self._tail].next = handle
        self._tail = handle

    def _link_before(self, target: int, movie: Movie) -> None:
        handle = movie.movie_id
        after = self._nodes[target]
        self._nodes[handle] = _Node(movie, prev=after.prev, next=target)
        if after.prev is None:
            self._head = handle
        else:
            self._nodes[after.prev].next = handle
        after.prev = handle

    def _unlink(self, handle: int) -> _Node:
        node = self._nodes.pop(handle)
        if node.prev is None:
            self._head = node.next
        else:
            self._nodes[node.prev].next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            self._nodes[node.next].prev = node.prev
        node.prev = node.next = None
        return node

    def _swap_with_next(self, handle: int) -> None:
        # before: p <-> a <-> b <-> n    after: p <-> b <-> a <-> n
        a = self._nodes[handle]
        b_handle = a.next
        b = self._nodes[b_handle]
        p, n = a.prev, b.next
        if p is None:
            self._head = b_handle
        else:
            self._nodes[p].next = b_handle
        if n is None:
            self._tail = handle
        else:
            self._nodes[n].prev = handle
        b.prev, b.next = p, handle
        a.prev, a.next = b_handle, n


def count_movies(movies: Optional[MovieList]) -> int:
    """Number of movies; 0 for a missing list."""
    return 0 if movies is None else len(movies)


def compute_duration(movies: Optional[MovieList]) -> float:
    """Total hours of a list. A missing list is an error, an empty one is 0.0."""
    if movies is None:
        raise InvalidArgumentError("A movie list is required to compute its duration.")
    return movies.total_duration()


# =========================
# Parsing & Loading
# =========================

# Leading float in the style of C strtod; anything after the match is ignored.
_DURATION_RE = re.compile(
    r"^\s*([+-]?(?:0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_duration(text: str) -> float:
    """
    Best-effort duration parse: "2.50" -> 2.5, "2.5h" -> 2.5, "0x10" -> 16.0, "abc" -> 0.0.
    """
    m = _DURATION_RE.match(text or "")
    if not m:
        return 0.0
    number = m.group(1)
    if "x" in number.lower():
        return float.fromhex(number)
    return float(number)


def format_movie_lines(movie: Movie) -> List[str]:
    """The three file lines for one movie."""
    return [movie.title, movie.genre, DURATION_FORMAT.format(movie.duration)]


def _read_lines(path: str) -> List[str]:
    if not path:
        raise InvalidArgumentError("A file name is required.")
    try:
        # BOM tolerant
        with open(path, "r", encoding="utf-8-sig") as f:
            lines = [ln.rstrip("\r\n") for ln in f]
    except FileNotFoundError as e:
        raise NotFoundError(f"{path} does not exist.") from e
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"{path} could not be read: {e}") from e

    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def load_movies(path: str) -> MovieList:
    """
    Read a movie file into a new MovieList.

    Raises NotFoundError / StorageError when the file cannot be opened or read,
    and LoadError when any movie in it cannot be built; in that case nothing
    that was read so far is kept.
    """
    lines = _read_lines(path)
    movies = MovieList()

    for start in range(0, len(lines), 3):
        title = lines[start]
        genre = lines[start + 1] if start + 1 < len(lines) else ""
        duration = parse_duration(lines[start + 2]) if start + 2 < len(lines) else 0.0
        line_no = start + 1
        try:
            movie = create_movie(title, genre, duration)
        except WatchlistError as e:
            if movies:
                movies.clear()
            raise LoadError(
                f"{path} is malformed at line {line_no}: {e}",
                line_no=line_no,
                exit_code=e.exit_code,
            ) from e
        movies.append(movie)

    return movies


def save_movies(movies: Optional[MovieList], path: str) -> None:
    """
    Write movies to path, replacing whatever was there.
    Raises InvalidArgumentError for an empty list and StorageError if the file
    cannot be written.
    """
    if count_movies(movies) == 0:
        raise InvalidArgumentError("Cannot save an empty list.")
    if not path:
        raise InvalidArgumentError("A file name is required.")

    text = "\n".join(line for movie in movies for line in format_movie_lines(movie))
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise StorageError(f"{path} could not be written: {e}") from e


# =========================
# Session
# =========================

@dataclass
class Session:
    """
    The library and watchlist of one interactive run. Both lists belong to the
    session alone; movies move between them by relocation.
    """
    library: MovieList
    watchlist: MovieList = field(default_factory=MovieList)

    def add_to_watchlist(self, movie: Movie, position: int) -> None:
        """Move a library movie into the watchlist at a zero-based position."""
        if not isinstance(movie, Movie):
            raise InvalidArgumentError(f"Expected a movie, got {movie!r}.")
        if movie not in self.library:
            raise InvalidArgumentError(f"{movie.title} is not in the library.")
        # Insert first: a bad position leaves both lists as they were.
        self.watchlist.insert(movie, position)
        self.library.remove(movie)

    def return_to_library(self, movie: Movie) -> None:
        """Move a watchlist movie to the end of the library."""
        if not isinstance(movie, Movie):
            raise InvalidArgumentError(f"Expected a movie, got {movie!r}.")
        if movie not in self.watchlist:
            raise InvalidArgumentError(f"{movie.title} is not in the watchlist.")
        self.library.append(movie)
        self.watchlist.remove(movie)

    def replace_watchlist(self, loaded: MovieList) -> None:
        """
        Install a freshly loaded watchlist.
        Previous watchlist movies not in the new one go back to the library;
        library movies whose titles appear in the new one are dropped from the library.
        """
        loaded_titles = set(loaded.titles())
        previous, self.watchlist = self.watchlist, loaded
        for movie in list(previous):
            previous.remove(movie)
            if movie.title not in loaded_titles:
                self.library.append(movie)
        for movie in loaded:
            match = self.library.search_by_title(movie.title)
            if match is not None:
                self.library.remove(match)

    def close(self) -> None:
        for movies in (self.watchlist, self.library):
            if movies:
                movies.clear()


# =========================
# Utility / Helpers
# =========================

def _spinner_one_line(action_text: str, cycles: Optional[int] = None, delay: Optional[float] = None) -> None:
    """
    Show a short one-line spinner animation to indicate loading.
    """
    cycles = SPINNER_CYCLES if cycles is None else cycles
    delay = SPINNER_DELAY if delay is None else delay
    if cycles <= 0:
        return
    seq = "|/-\\"
    print(action_text, end="", flush=True)
    for i in range(cycles):
        print(f"\r{action_text} {seq[i % len(seq)]}", end="", flush=True)
        time.sleep(delay)
    print("\r" + " " * (len(action_text) + 2), end="\r", flush=True)


def _strip_int_like(s: str) -> Optional[int]:
    """
    Accept numeric inputs like "1" or "1." and return int(1). Returns None if not valid.
    """
    s = s.strip()
    if s.endswith("."):
        s = s[:-1]
    if s.isdigit() or (s and s[0] in "+-" and s[1:].isdigit()):
        try:
            return int(s)
        except ValueError:
            return None
    return None


def page_break() -> None:
    print("*" * PAGE_BREAK_WIDTH)
    print()


def prompt_for(prompt: str) -> str:
    """Read one line of input without its line ending."""
    return input(prompt).rstrip("\r\n")


def prompt_for_int(min_value: int, max_value: int, prompt: str) -> int:
    """
    Prompt until an integer within [min_value, max_value] is entered.
    'q' quits the program.
    """
    while True:
        s = prompt_for(prompt)
        if s.strip().lower() == "q":
            sys.exit(0)
        value = _strip_int_like(s)
        if value is not None and min_value <= value <= max_value:
            return value
        print()
        print(f"An integer between {min_value} and {max_value} was expected.")
        print()


def print_movie_list(movies: MovieList) -> None:
    for movie in movies:
        print(format_movie(movie))
    print()


# =========================
# Add Movie Menu
# =========================

class AddMovieOption(IntEnum):
    ADD_TO_BEGINNING = 1
    ADD_TO_END = 2
    INSERT_WITHIN = 3


def get_add_movie_option() -> AddMovieOption:
    print("*** Add Movie Menu ***")
    print(" 1) Add to beginning")
    print(" 2) Add to end")
    print(" 3) Insert at a position")
    print()
    option = prompt_for_int(1, 3, "Enter how you'd like to add: ")
    print()
    return AddMovieOption(option)


def feature_add_movie(session: Session) -> None:
    """
    Look a title up in the library and move that movie into the watchlist
    at the beginning, the end, or a chosen 1-based position.
    """
    title = prompt_for("Enter the title of the movie to add: ")
    print()
    movie = session.library.search_by_title(title)
    if movie is None:
        print(f"{title} not found in the library. Please search for movies before attempting to add.")
        print()
        return

    option = get_add_movie_option()
    if option == AddMovieOption.ADD_TO_BEGINNING:
        position = 0
    elif option == AddMovieOption.ADD_TO_END:
        position = len(session.watchlist)
    else:
        highest = max(len(session.watchlist), 1)
        print(f"Enter a position from 1 to {highest} to add the movie: ")
        position = prompt_for_int(1, highest, "") - 1

    session.add_to_watchlist(movie, position)
    print(f"{title} added to the watchlist.")
    print()


# =========================
# Library Menu
# =========================

class LibraryOption(IntEnum):
    VIEW_ALL_MOVIES = 1
    SEARCH_LIBRARY = 2
    ADD_MOVIE_TO_WATCHLIST = 3
    BACK_TO_WATCHLIST = 4


def get_library_option() -> LibraryOption:
    print("*** Library Menu ***")
    print("1) View all movies")
    print("2) Search by title")
    print("3) Add a movie to watchlist")
    print("4) Back to watchlist")
    print()
    option = prompt_for_int(1, 4, "Enter a menu choice: ")
    print()
    return LibraryOption(option)


def feature_search(movies: MovieList, where: str) -> None:
    title = prompt_for("Enter a title to search: ")
    print()
    if movies.search_by_title(title) is not None:
        print(f"{title} found in the {where}.")
    else:
        print(f"{title} not found in the {where}.")
    print()


def handle_library_option(option: LibraryOption, session: Session) -> None:
    if option == LibraryOption.VIEW_ALL_MOVIES:
        print_movie_list(session.library)
    elif option == LibraryOption.SEARCH_LIBRARY:
        feature_search(session.library, "library")
    elif option == LibraryOption.ADD_MOVIE_TO_WATCHLIST:
        page_break()
        feature_add_movie(session)


def run_library_menu(session: Session) -> None:
    while True:
        option = get_library_option()
        if option == LibraryOption.BACK_TO_WATCHLIST:
            return
        try:
            handle_library_option(option, session)
        except WatchlistError as e:
            print(f"[Error] {e}")
            print()
        page_break()


# =========================
# Watchlist Menu
# =========================

class WatchlistOption(IntEnum):
    PRINT_WATCHLIST = 1
    SHOW_DURATION = 2
    SEARCH_WATCHLIST = 3
    MOVE_MOVIE_UP = 4
    MOVE_MOVIE_DOWN = 5
    REMOVE_MOVIE = 6
    SAVE_WATCHLIST = 7
    LOAD_WATCHLIST = 8
    GO_TO_LIBRARY = 9
    QUIT = 10


def get_watchlist_option() -> WatchlistOption:
    print("*** Watchlist Menu ***")
    print(" 1) Print watchlist")
    print(" 2) Show duration")
    print(" 3) Search by title")
    print(" 4) Move a movie up")
    print(" 5) Move a movie down")
    print(" 6) Remove a movie")
    print(" 7) Save watchlist")
    print(" 8) Load watchlist")
    print(" 9) Go to movie library")
    print("10) Quit")
    print()
    option = prompt_for_int(1, 10, "Enter a menu choice: ")
    print()
    return WatchlistOption(option)


def feature_show_duration(session: Session) -> None:
    hours = compute_duration(session.watchlist)
    print(f"Duration is {DURATION_FORMAT.format(hours)} hours.")
    print()


def feature_move_movie(session: Session, direction: str) -> None:
    title = prompt_for(f"Enter the title of the movie to move {direction}: ")
    print()
    try:
        moved = session.watchlist.move(title, direction)
    except MovieNotFoundError:
        print(f"{title} not found in the watchlist. Please search for movies before attempting to move.")
        print()
        return
    if moved:
        print(f"{title} moved {direction}.")
    else:
        edge = "top" if direction == UP else "bottom"
        print(f"{title} is already at the {edge} of the watchlist.")
    print()


def feature_remove_movie(session: Session) -> None:
    title = prompt_for("Enter the title of the movie to remove: ")
    print()
    movie = session.watchlist.search_by_title(title)
    if movie is None:
        print(f"{title} not found in the watchlist. Please search for movies before attempting to remove.")
        print()
        return
    session.return_to_library(movie)
    print(f"{title} returned to the library.")
    print()


def feature_save_watchlist(session: Session) -> None:
    if not session.watchlist:
        raise InvalidArgumentError("The watchlist is empty; there is nothing to save.")
    path = prompt_for("Enter the name of the file to save watchlist to: ")
    print()
    save_movies(session.watchlist, path)
    print(f"Watchlist saved to {path}.")
    print()


def feature_load_watchlist(session: Session) -> None:
    path = prompt_for("Enter the name of the file to read the watchlist from: ")
    print()
    _spinner_one_line("Loading watchlist...")
    loaded = load_movies(path)
    session.replace_watchlist(loaded)
    print(f"Watchlist loaded from {path} ({len(loaded)} movies).")
    print()


def handle_watchlist_option(option: WatchlistOption, session: Session) -> None:
    if option == WatchlistOption.PRINT_WATCHLIST:
        print_movie_list(session.watchlist)
    elif option == WatchlistOption.SHOW_DURATION:
        feature_show_duration(session)
    elif option == WatchlistOption.SEARCH_WATCHLIST:
        feature_search(session.watchlist, "watchlist")
    elif option == WatchlistOption.MOVE_MOVIE_UP:
        feature_move_movie(session, UP)
    elif option == WatchlistOption.MOVE_MOVIE_DOWN:
        feature_move_movie(session, DOWN)
    elif option == WatchlistOption.REMOVE_MOVIE:
        feature_remove_movie(session)
    elif option == WatchlistOption.SAVE_WATCHLIST:
        feature_save_watchlist(session)
    elif option == WatchlistOption.LOAD_WATCHLIST:
        feature_load_watchlist(session)
    elif option == WatchlistOption.GO_TO_LIBRARY:
        page_break()
        run_library_menu(session)


def run_watchlist_menu(session: Session) -> None:
    """
    Main loop: show the watchlist menu and route to the chosen feature until Quit.
    Failures are reported and the loop carries on.
    """
    while True:
        option = get_watchlist_option()
        if option == WatchlistOption.QUIT:
            return
        try:
            handle_watchlist_option(option, session)
        except WatchlistError as e:
            print(f"[Error] {e}")
            print()
        page_break()


# =========================
# Entry Point
# =========================

def load_library(path: str) -> MovieList:
    _spinner_one_line("Loading library...")
    return load_movies(path)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Program entry point. argv[0] (after the program name) is the library file.
    Returns the process exit status.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: movie_watchlist.py LIBRARY_FILE")
        return errno.E2BIG

    print("Movie Watchlist (CLI)")
    print("Python 3.10+\n")

    try:
        library = load_library(args[0])
    except WatchlistError as e:
        print(f"[Error] {e}")
        return e.exit_code
    except MemoryError:
        print("[Error] Out of memory while loading the library.")
        return errno.ENOMEM

    print(f"Library loaded ({len(library)} movies).\n")
    session = Session(library)
    try:
        run_watchlist_menu(session)
    except EOFError:
        print()
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
