import sys
from jlands.common.environments import flag

in_global_debug_mode = flag('JLANDS_DEBUG',
                            description='Enable the debug mode')
in_interactive_shell = sys.__stdout__ and sys.__stdout__.isatty()
cli_show_list_item_index = flag('JLANDS_SHOW_LIST_ITEM_INDEX',
                                description='The CLI output will also mark every item with its source index')
