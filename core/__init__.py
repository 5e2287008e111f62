"""
edsign core: envelope schema, signature codec, key resolution and the
sign/verify operations. No command-line concerns live here.
"""
