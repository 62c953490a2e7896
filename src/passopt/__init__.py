"""passopt: expose registered passes as command-line option values.

Import from submodules:
- core.pass_info: PassInfo descriptor
- core.pass_registry: PassRegistry, PassRegistrationListener
- core.filters: eligibility predicates (accept_all, PassArgFilter)
- cli.pass_name_parser: PassNameParser, PassOption, pass_list_option
"""

__version__ = "0.1.0"
