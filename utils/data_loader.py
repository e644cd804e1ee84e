import gzip


def load_text(path, size_limit=None, encoding='latin-1'):
    opener = gzip.open if str(path).endswith('.gz') else open
    with opener(path, 'rt', encoding=encoding) as f:
        if size_limit:
            return f.read(size_limit)  # Read up to `size_limit` characters
        return f.read()
