# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Longest common subsequence of two arrays, used to align array elements."""

from ..utils import deep_equal

__all__ = ["lcs_indices"]


def compare_grid(A, B, compare=deep_equal):
    "Brute force compute grid G[i, j] == compare(A[i], B[j])."
    return [[compare(a, b) for b in B] for a in A]


def llcs_grid(G):
    "Brute force compute grid R[x][y] == llcs(A[:x], B[:y]), given G[i][j] = compare(A[i], B[j])."
    N = len(G)
    M = len(G[0]) if N else 0

    R = [[0]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        for y in range(1, M+1):
            if G[x-1][y-1]:
                R[x][y] = R[x-1][y-1] + 1
            else:
                R[x][y] = max(R[x-1][y], R[x][y-1])
    return R


def backtrack_lcs(G, R):
    """Walk R backwards to recover one lcs.

    Returns two lists (A_indices, B_indices) with length == llcs(A, B).
    On ties the element of A is skipped first, which makes the
    result a deterministic function of the inputs.
    """
    x = len(G)
    y = len(R[0]) - 1
    A_indices = []
    B_indices = []
    while x > 0 and y > 0:
        if G[x-1][y-1]:
            assert R[x][y] == R[x-1][y-1] + 1
            x -= 1
            y -= 1
            A_indices.append(x)
            B_indices.append(y)
        elif R[x][y] == R[x-1][y]:
            x -= 1
        else:
            assert R[x][y] == R[x][y-1]
            y -= 1
    A_indices.reverse()
    B_indices.reverse()
    return A_indices, B_indices


def lcs_indices(A, B, compare=deep_equal):
    """Compute the indices of a longest common subsequence of A and B.

    Common prefix and suffix are matched directly, the O(NM) grid
    is only computed for the middle part where the sequences differ.
    """
    N, M = len(A), len(B)
    head = 0
    while head < N and head < M and compare(A[head], B[head]):
        head += 1
    tail = 0
    while tail < N - head and tail < M - head and compare(A[N-1-tail], B[M-1-tail]):
        tail += 1

    A_mid = A[head:N-tail]
    B_mid = B[head:M-tail]
    A_indices = list(range(head))
    B_indices = list(range(head))
    if A_mid and B_mid:
        G = compare_grid(A_mid, B_mid, compare)
        R = llcs_grid(G)
        ai, bi = backtrack_lcs(G, R)
        A_indices.extend(i + head for i in ai)
        B_indices.extend(j + head for j in bi)
    A_indices.extend(range(N - tail, N))
    B_indices.extend(range(M - tail, M))
    return A_indices, B_indices
