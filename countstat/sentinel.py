class Sentinel:
    '''
    A named placeholder value which can't be confused with any real value that
    the caller might produce.

    The tree uses these as the not-found result of a lookup and as the
    stop / continue signals a visitor returns while walking. A visitor that
    forgets to return anything gives back None, which is neither of them, so
    the walk just carries on.

    The name is only there to make the repr readable. Two sentinels with the
    same name are still different objects and never == each other. The
    truthyness lets `if tree.get(path):` read naturally when the lookup
    failed.
    '''
    def __init__(self, name, truthyness=True):
        self.name = name
        self.truthyness = truthyness

    def __bool__(self):
        return bool(self.truthyness)

    def __repr__(self):
        return f'<Sentinel {repr(self.name)}>'
