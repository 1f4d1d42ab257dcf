"""Read-only GitPython access to the state shown in the prompt.

``PromptRepository`` is a scoped handle: open it, read the branch, tracking
and status information, and close it. Nothing here writes to the repository;
``git status`` runs with optional locks disabled so the index is never
refreshed on disk.

Example:
    ```python
    from gitprompt.git import PromptRepository

    with PromptRepository.open("/path/to/repo/src") as repo:
        branch = repo.resolve_branch()
        tracking = repo.tracking(branch)
        counts = repo.status_counts()
    ```
"""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

from git import (
    Head,
    InvalidGitRepositoryError,
    NoSuchPathError,
    RemoteReference,
    Repo,
)
from git.exc import GitCommandNotFound
from git.exc import GitError as GitPythonError
from git.refs.log import RefLog
from gitdb.exc import ODBError

from gitprompt.config import UntrackedMode
from gitprompt.exceptions import (
    GitNotFoundError,
    NotARepositoryError,
    RepositoryReadError,
)
from gitprompt.git.models import (
    BranchRef,
    DetachedHead,
    NamedBranch,
    StatusCounts,
    Tracking,
    UnbornBranch,
)
from gitprompt.git.porcelain import parse_porcelain_v2
from gitprompt.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "DEFAULT_SHORT_SHA_LENGTH",
    "PromptRepository",
]

#: Length of the commit id shown for a detached HEAD
DEFAULT_SHORT_SHA_LENGTH = 7

#: Ref holding the stash; each stash entry is one reflog line in the common dir
STASH_REF = "refs/stash"

#: Keeps ``git status`` from taking index.lock to write a refreshed index
_READ_ONLY_ENV = {"GIT_OPTIONAL_LOCKS": "0"}

#: Failures from GitPython, gitdb and the filesystem that mean "unreadable"
_READ_FAILURES: tuple[type[BaseException], ...] = (
    GitPythonError,
    ODBError,
    OSError,
    ValueError,
)


class PromptRepository:
    """Scoped, read-only view of a git working tree.

    Use ``PromptRepository.open()`` to discover the repository enclosing a
    path, then use the instance as a context manager so GitPython's cached
    ``git cat-file`` processes are released deterministically.
    """

    def __init__(self, repo: Repo) -> None:
        """Wrap an already opened GitPython repository.

        Args:
            repo: Non-bare GitPython Repo.
        """
        self._repo = repo
        self._path = Path(repo.working_tree_dir or repo.git_dir)

    @classmethod
    def open(cls, path: Path | str | None = None) -> PromptRepository:
        """Locate the repository enclosing ``path``.

        Searches ``path`` and its ancestors for git metadata.

        Args:
            path: Starting directory. Defaults to the current directory.

        Returns:
            An open PromptRepository.

        Raises:
            NotARepositoryError: If no repository encloses the path, the path
                does not exist, or the repository is bare.
            GitNotFoundError: If the git executable is missing.
            RepositoryReadError: If the repository metadata cannot be read.
        """
        start = Path.cwd() if path is None else Path(path)

        try:
            repo = Repo(start, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise NotARepositoryError(
                f"Not a git repository: {start}",
                path=start,
            ) from e
        except GitCommandNotFound as e:
            raise GitNotFoundError("Git CLI not found. Please install git.") from e
        except _READ_FAILURES as e:
            raise RepositoryReadError(
                f"Cannot open repository at {start}: {e}",
                operation="discover",
                path=start,
            ) from e

        if repo.bare:
            repo.close()
            raise NotARepositoryError(
                f"Bare repository has no working tree: {start}",
                path=start,
            )

        logger.debug("repository_opened", path=str(start), git_dir=repo.git_dir)
        return cls(repo)

    def __enter__(self) -> PromptRepository:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release GitPython resources held by the handle."""
        self._repo.close()

    @property
    def path(self) -> Path:
        """Root of the working tree."""
        return self._path

    @property
    def repo(self) -> Repo:
        """Underlying GitPython Repo instance."""
        return self._repo

    def _read_error(self, exc: BaseException, operation: str) -> RepositoryReadError:
        if isinstance(exc, GitCommandNotFound):
            return GitNotFoundError("Git CLI not found. Please install git.")
        logger.debug("repository_read_failed", operation=operation, error=str(exc))
        return RepositoryReadError(
            f"Failed to read {operation} in {self._path}: {exc}",
            operation=operation,
            path=self._path,
        )

    # -------------------------------------------------------------------------
    # HEAD
    # -------------------------------------------------------------------------

    def resolve_branch(
        self, short_sha_length: int = DEFAULT_SHORT_SHA_LENGTH
    ) -> BranchRef:
        """Read the current HEAD.

        Args:
            short_sha_length: Characters of the commit id kept for a detached HEAD.

        Returns:
            NamedBranch, DetachedHead, or UnbornBranch when HEAD names a
            branch that has no commit yet.

        Raises:
            RepositoryReadError: If HEAD or the branch ref cannot be read, or
                the branch ref points at a missing commit.
        """
        head = self._repo.head
        try:
            if head.is_detached:
                return DetachedHead(sha=head.commit.hexsha[:short_sha_length])

            branch = head.reference
            if head.is_valid():
                return NamedBranch(name=branch.name)

            # An existing ref that does not resolve is damage, not an unborn branch
            if any(h.path == branch.path for h in self._repo.heads):
                raise RepositoryReadError(
                    f"Branch '{branch.name}' points to a missing commit",
                    operation="head",
                    path=self._path,
                )
            return UnbornBranch(name=branch.name)
        except _READ_FAILURES as e:
            raise self._read_error(e, "head") from e

    # -------------------------------------------------------------------------
    # Upstream
    # -------------------------------------------------------------------------

    def tracking(self, branch: BranchRef) -> Tracking | None:
        """Compare the branch tip with its configured upstream.

        The upstream may be a remote-tracking branch or, for branches created
        with ``--track <local-branch>``, another local branch.

        Args:
            branch: Result of resolve_branch().

        Returns:
            Tracking with ahead/behind counts, or None when the branch is not
            a NamedBranch, has no upstream configured, or the upstream ref
            does not exist locally.

        Raises:
            RepositoryReadError: If refs or commits cannot be read.
        """
        if not isinstance(branch, NamedBranch):
            return None

        try:
            reference = self._repo.head.reference
            if not isinstance(reference, Head):
                return None

            upstream = self._upstream_of(reference)
            if upstream is None or not upstream.is_valid():
                return None

            output = self._repo.git.rev_list(
                "--left-right", "--count", f"HEAD...{upstream.path}"
            )
            ahead, behind = (int(n) for n in output.split())
        except _READ_FAILURES as e:
            raise self._read_error(e, "tracking") from e

        return Tracking(ahead=ahead, behind=behind, upstream=upstream.name)

    def _upstream_of(self, head: Head) -> Head | RemoteReference | None:
        # remote = "." means the upstream is a local branch (git branch --track)
        reader = head.config_reader()
        if not (
            reader.has_option(Head.k_config_remote)
            and reader.has_option(Head.k_config_remote_ref)
        ):
            return None
        if reader.get_value(Head.k_config_remote) == ".":
            merge = str(reader.get_value(Head.k_config_remote_ref))
            return Head(self._repo, Head.to_full_path(merge))
        return head.tracking_branch()

    # -------------------------------------------------------------------------
    # Index, working tree and stash
    # -------------------------------------------------------------------------

    def stash_count(self) -> int:
        """Number of stash entries, read from the reflog of refs/stash.

        The stash is shared by all worktrees, so its reflog is read from the
        common git dir rather than a linked worktree's private one. A missing
        reflog yields an empty log.
        """
        log_path = Path(self._repo.common_dir) / "logs" / STASH_REF
        try:
            return len(RefLog.from_file(str(log_path)))
        except _READ_FAILURES as e:
            raise self._read_error(e, "stash") from e

    def status_counts(
        self,
        untracked_files: UntrackedMode = "normal",
        count_stash: bool = True,
    ) -> StatusCounts:
        """Count staged, unstaged, conflicted and untracked paths.

        Args:
            untracked_files: git's untracked scan mode ("all", "normal", "no").
            count_stash: If False, the stash is not read and reported as 0.

        Returns:
            StatusCounts for the working tree.

        Raises:
            RepositoryReadError: If git status fails or its output is malformed.
        """
        try:
            output = self._repo.git.status(
                "--porcelain=v2",
                "-z",
                f"--untracked-files={untracked_files}",
                env=_READ_ONLY_ENV,
            )
            files = parse_porcelain_v2(output)
        except _READ_FAILURES as e:
            raise self._read_error(e, "status") from e

        return StatusCounts(
            staged=files.staged,
            unstaged=files.unstaged,
            conflicted=files.conflicted,
            untracked=files.untracked,
            stashed=self.stash_count() if count_stash else 0,
        )
