"""sv-modular -- module scaffolding for SvelteKit projects.

Generates frontend (page + store) and backend (typed in-memory CRUD API)
modules into a SvelteKit project's conventional layout, and keeps a
``module.json`` manifest and a ``module.log`` activity log at the project
root.

Quick usage::

    from sv_modular.config import Config
    from sv_modular.scaffolder import ServerModuleGenerator

    generator = ServerModuleGenerator(Config(project_root="./my-app"))
    result = generator.generate("bands/linkinpark/song")
"""

__version__ = "1.0.0"
