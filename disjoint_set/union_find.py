import numbers


class DisjointSetError(Exception):
    """Base class for exceptions in disjoint-set."""
    pass


class InvalidSize(DisjointSetError, ValueError):
    """Raised when a :class:`.DisjointSet` is created with a
    non-positive (or non-integer) number of elements."""
    pass


class IndexOutOfRange(DisjointSetError, IndexError):
    """Raised when an element id is not an integer in ``[0, size)``."""
    pass


class DisjointSet(object):
    """The union-find data structure with union by rank and path compression.

    A ``DisjointSet`` partitions the integers ``0, 1, ..., size - 1``
    into disjoint groups. Each group is identified by its root (its
    representative). Initially every element is in a group by itself.
    The ``union(p, q)`` operation fuses the groups that contain ``p``
    and ``q``, and the ``find(p)`` operation identifies the root of the
    group to which ``p`` belongs. Groups are never split.

    Parameters
    ----------
    size : int
        The number of elements. Must be positive.

    Raises
    ------
    InvalidSize
        Raised when ``size`` is not a positive integer.

    Notes
    -----
    The ``rank`` of a root is an upper bound on the height of its tree,
    not the number of elements in its group. A rank increases (by one)
    only when two roots of equal rank are merged. Attaching the lower
    ranked root beneath the higher ranked one keeps every tree's height
    at most ``log2(size)``; together with path compression, ``m``
    operations cost ``O(m alpha(size))`` in total.

    :meth:`.find` and :meth:`.connected` look like queries but rewrite
    parent pointers. The structure is not thread-safe, even for callers
    that only ever call ``find``. Guard every call with a single lock if
    it is shared between threads.

    Examples
    --------
    >>> import disjoint_set as ds
    >>> s = ds.DisjointSet(10)
    >>> s.union(2, 5)
    >>> s.union(2, 8)
    >>> s.connected(5, 8)
    True
    >>> s.count()
    8
    """
    def __init__(self, size):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral):
            msg = "size must be an integer, got {0!r}.".format(size)
            raise InvalidSize(msg)
        if size <= 0:
            msg = "size must be positive, got {0}.".format(size)
            raise InvalidSize(msg)

        self._size   = int(size)
        self._parent = list(range(self._size))
        self._rank   = [0] * self._size
        self._count  = self._size


    def __repr__(self):
        the_str = "DisjointSet: {0} elements in {1} groups."
        return the_str.format(self._size, self._count)


    @property
    def size(self):
        """int: The number of elements, fixed at construction."""
        return self._size


    def _check_index(self, p):
        if isinstance(p, bool) or not isinstance(p, numbers.Integral):
            msg = "Element ids must be integers, got {0!r}.".format(p)
            raise IndexOutOfRange(msg)
        if not 0 <= p < self._size:
            msg = "Element {0} is not in [0, {1}).".format(p, self._size)
            raise IndexOutOfRange(msg)
        return int(p)


    def count(self):
        """Returns the number of distinct groups."""
        return self._count


    def find(self, p):
        """Locates the root of the group to which the element ``p`` belongs.

        Every element visited on the way up is re-pointed directly at
        the root (path compression), so this mutates the structure even
        though the groups themselves never change.

        Parameters
        ----------
        p : int
            An element id in ``[0, size)``.

        Returns
        -------
        int
            The root of the group that contains ``p``.

        Raises
        ------
        IndexOutOfRange
            Raised when ``p`` is not an integer in ``[0, size)``.
        """
        p = self._check_index(p)
        parent = self._parent

        root = p
        while parent[root] != root:
            root = parent[root]

        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p

        return root


    def union(self, p, q):
        """Merges the group that contains ``p`` with the group that
        contains ``q``.

        Nothing changes if ``p`` and ``q`` are already in the same group.

        Parameters
        ----------
        p, q : int
            Element ids in ``[0, size)``.

        Raises
        ------
        IndexOutOfRange
            Raised when either ``p`` or ``q`` is out of range. The
            structure is left untouched.
        """
        self._check_index(q)
        pr, qr = self.find(p), self.find(q)
        if pr == qr:
            return

        r1, r2 = self._rank[pr], self._rank[qr]
        if r1 < r2:
            self._parent[pr] = qr
        else:
            if r1 == r2:
                self._rank[pr] += 1
            self._parent[qr] = pr

        self._count -= 1


    def connected(self, p, q):
        """Returns whether ``p`` and ``q`` are in the same group.

        Compresses paths the same way two calls to :meth:`.find` do.

        Raises
        ------
        IndexOutOfRange
            Raised when either ``p`` or ``q`` is out of range.
        """
        self._check_index(q)
        return self.find(p) == self.find(q)
