"""
module maskedprompt.prompt

Contains everything shared by prompts and the backends that drive them
"""
