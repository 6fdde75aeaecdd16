"""
GPIO pin management over the kernel sysfs interface

    PinValidator      checks pins against the board profile
    SysfsWriter       export, unexport and direction writes
    interpret         command line pin flags to an ordered list of PinAction
    ActionExecutor    applies the PinAction list, one ActionResult each
"""
from pinsetup.gpio.executor import ActionExecutor
from pinsetup.gpio.interpreter import ParsedCommand, interpret
from pinsetup.gpio.sysfs_writer import SysfsWriter
from pinsetup.gpio.validator import PinValidator

__all__ = ['ActionExecutor', 'ParsedCommand', 'PinValidator', 'SysfsWriter', 'interpret']
