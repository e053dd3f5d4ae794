import builtins
import multiprocessing


def parallelMap(f, items, nProcs=None):
    # f must be a module level function unless nProcs == 1
    if nProcs == 1:
        return list(builtins.map(f, items))
    else:
        with multiprocessing.Pool(nProcs) as pool:
            return pool.map(f, items)


map = parallelMap


def cpu_count():
    return multiprocessing.cpu_count()


def row_blocks(height, nblocks):
    n = max(1, min(nblocks, height))
    bounds = [height * i // n for i in range(n + 1)]
    return list(zip(bounds[:-1], bounds[1:]))
