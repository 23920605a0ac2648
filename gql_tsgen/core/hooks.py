"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the IR before generation or transform the generated code after.

Example usage:
    from gql_tsgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop the root operation types
    class DropRootTypes(PreGenerateHook):
        def pre_generate(self, ir):
            for name in ("Query", "Mutation", "Subscription"):
                ir.types.pop(name, None)
            return ir

    # Post-generation hook to add a lint directive
    class DisableLint(PostGenerateHook):
        def post_generate(self, filename, content):
            return "/* eslint-disable */\\n" + content
"""

from typing import Protocol, runtime_checkable

from .ir import IRSchema


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the IR schema before the enum pass
    and can modify it. The modified IR is then used for generation.
    """

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        """Called before code generation.

        Args:
            ir: The intermediate representation of the schema

        Returns:
            The (possibly modified) IR to use for generation
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated code for each file
    and can transform it before it's written to disk.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation for each file.

        Args:
            filename: Path of the file relative to the output directory
                      (e.g., "item.ts", "enums/color.ts")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, ir: IRSchema) -> IRSchema:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            ir = hook.pre_generate(ir)
        return ir

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
