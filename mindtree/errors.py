class MindTreeError(Exception):
    pass


class ConfigurationError(MindTreeError):
    pass


class InvariantError(MindTreeError):
    pass


class DropTargetError(MindTreeError):
    pass
