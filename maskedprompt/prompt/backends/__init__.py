"""
module maskedprompt.prompt.backends

Contains every terminal integration that can drive a prompt interaction
"""
