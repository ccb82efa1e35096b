def elapsed_time(start, finish):
    """Split the seconds between two time.time() readings into (hours, minutes, seconds)."""
    elapsed = int(finish - start)
    hr, rest = divmod(elapsed, 3600)
    min, sec = divmod(rest, 60)
    return hr, min, sec
