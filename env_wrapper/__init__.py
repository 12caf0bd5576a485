from env_wrapper.wrapper import EnvWrapper, default, new

__all__ = ["EnvWrapper", "default", "new"]
