"""sv-modular scaffolder -- renders and writes SvelteKit modules.

Quick usage::

    from sv_modular.config import Config
    from sv_modular.scaffolder import FrontendModuleGenerator, ServerModuleGenerator

    config = Config(project_root="./my-app")
    FrontendModuleGenerator(config).generate("User Profile", route="account/profile")
    ServerModuleGenerator(config).generate("bands/linkinpark/song")
"""

from sv_modular.scaffolder.frontend_gen import FrontendModuleGenerator
from sv_modular.scaffolder.generator import GenerationResult, ModuleGenerator
from sv_modular.scaffolder.server_gen import ServerModuleGenerator
from sv_modular.scaffolder.templates import TemplateRenderer

__all__ = [
    "FrontendModuleGenerator",
    "GenerationResult",
    "ModuleGenerator",
    "ServerModuleGenerator",
    "TemplateRenderer",
]
