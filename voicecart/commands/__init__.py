from voicecart.commands.command import Add, Command, Modify, Remove, Search, Unknown
from voicecart.commands.parser import parse_command
