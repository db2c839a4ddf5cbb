_generator_registry = {}


def register_generator(name: str):
    def decorator(func):
        if name in _generator_registry:
            raise ValueError(f"Generator '{name}' already registered")
        _generator_registry[name] = func
        return func

    return decorator


def get_generator_config(name: str):
    try:
        return _generator_registry[name]()
    except KeyError:
        raise ValueError(
            f"No generator config found for '{name}'. "
            f"Available generators: {sorted(_generator_registry)}"
        )


def get_all_generator_configs():
    return dict((name, func()) for name, func in _generator_registry.items())
