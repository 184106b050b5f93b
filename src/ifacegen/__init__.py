"""
ifacegen Package.

A small code-generation library that describes interface types (a name plus
an ordered set of method signatures) and renders them as source code.

Usage
-----

Building a Descriptor
^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from ifacegen import MethodSignature, Param, new_interface

    greeter = new_interface(
      "example.com/greet",
      "Greeter",
      [MethodSignature("Greet", params=[Param("string", "name")], returns=[Param("string")])],
    )
    print(greeter.render())
    # type Greeter interface {
    # 	Greet(name string) string
    # }

Other Targets
^^^^^^^^^^^^^

.. code-block:: python

    from ifacegen import RenderConfig

    print(greeter.render(RenderConfig(target="python")))
"""

from typing import Optional, Sequence

from ifacegen.codegen.ir import InterfaceDescriptor, MethodSignature, Param, QualifiedRef, new_interface
from ifacegen.config import RenderConfig
from ifacegen.loader import load_interfaces

__version__ = "0.1.0"


def render_interface(
  pkg: str,
  name: str,
  methods: Sequence[MethodSignature],
  comment: str = "",
  target: str = "go",
  config: Optional[RenderConfig] = None,
) -> str:
  """
  Builds an interface descriptor and renders it in one step.

  Args:
      pkg (str): Package path or namespace of the interface.
      name (str): Interface name.
      methods (Sequence[MethodSignature]): Method signatures in declaration order.
      comment (str): Optional documentation comment.
      target (str): Backend key (e.g. "go", "python"). Ignored when `config` is given.
      config (RenderConfig, optional): Full render settings.

  Returns:
      str: The generated source code.

  Raises:
      ValueError: If `target` is not a registered backend.
  """
  descriptor = new_interface(pkg, name, methods, comment=comment)
  return descriptor.render(config or RenderConfig(target=target))


__all__ = [
  "InterfaceDescriptor",
  "MethodSignature",
  "Param",
  "QualifiedRef",
  "RenderConfig",
  "load_interfaces",
  "new_interface",
  "render_interface",
  "__version__",
]
