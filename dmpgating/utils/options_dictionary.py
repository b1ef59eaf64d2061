"""Define the OptionsDictionary class.

Copyright (c) 2016-2018, openmdao.org

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this software except in compliance with the License.
You may obtain a copy of the License at

http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

This module derives from OpenMDAO 2.2.0. It was reduced to the needs of
gating function configuration.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional


# unique object to check if default is given
_undefined = object()


class OptionsDictionary(object):
    """
    Dictionary with pre-declaration of keys for value-checking and default values.

    Gating functions store their boundary values in such a dictionary, so that
    each value is validated as soon as it is assigned.

    Attributes
    ----------
    _dict : dict of dict
        Dictionary of entries. Each entry is a dictionary consisting of value,
        dtype, exclude, desc and check_valid.
    _read_only : bool
        If True, no options can be set.
    """

    __slots__ = ["_dict", "_read_only"]

    def __init__(self, read_only=False):
        """
        Initialize all attributes.

        Parameters
        ----------
        read_only : bool
            If True, setting (via __setitem__) is not permitted.
        """
        self._dict = {}
        self._read_only = read_only

    def __json__(self) -> Dict[str, Any]:
        """Creates a JSONable dictionary of the options which have been set.

        Returns
        -------
        Dict[str, Any]
            The dictionary
        """
        return {
            name: meta["value"]
            for name, meta in self._dict.items()
            if meta["has_been_set"]
        }

    def __repr__(self):
        return repr(self._dict)

    @property
    def read_only(self) -> bool:
        """bool : Is setting options forbidden?"""
        return self._read_only

    def lock(self) -> None:
        """Forbid any further modification of the options."""
        self._read_only = True

    def _assert_valid(self, name, value):
        """
        Check whether the given value is valid, where the key has already been declared.

        The optional checks consist of ensuring: the type of value is one of a list of
        acceptable types but not an excluded one, and value satisfies check_valid.

        Parameters
        ----------
        name : str
            The key for the declared option.
        value : object
            The default or user-set value to check.
        """
        meta = self._dict[name]
        dtype = meta["dtype"]

        if dtype is not None:
            excluded = meta["exclude"]
            if not isinstance(value, dtype) or (excluded and isinstance(value, excluded)):
                raise TypeError(
                    "Value ({!r}) of option {!r} has type of ({}), but "
                    "expected type ({}).".format(value, name, type(value), dtype)
                )

        if meta["check_valid"] is not None:
            meta["check_valid"](name, value)

    def declare(
        self,
        name: str,
        default=_undefined,
        dtype=None,
        desc: str = "",
        check_valid: Optional[Callable[[str, Any], None]] = None,
        exclude=None,
    ):
        r"""
        Declare an option.

        If dtype was given when declaring, the value of the option must satisfy
        isinstance(value, dtype), but not isinstance(value, exclude).

        Parameters
        ----------
        name : str
            Name of the option.
        default : object or Null
            Optional default value that must be valid under the above condition.
        dtype : type or tuple of types or None
            Optional type or list of acceptable optional types.
        desc : str
            Optional description of the option.
        check_valid : function or None
            General check function that raises an exception if value is not valid.
        exclude : type or tuple of types or None
            Subtypes of `dtype` which are not acceptable (e.g. bool for numbers).
        """
        if dtype is not None and not isinstance(dtype, (type, tuple)):
            raise TypeError(
                f"In declaration of option {name!r}, the 'dtype' arg must be None, a type "
                f"or a tuple - not {dtype}."
            )

        default_provided = default is not _undefined

        self._dict[name] = {
            "value": default if default_provided else None,
            "dtype": dtype,
            "desc": desc,
            "check_valid": check_valid,
            "has_been_set": default_provided,
            "exclude": exclude,
        }

        if default_provided:
            self._assert_valid(name, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._dict)

    def keys(self):
        """Return an iterator over dict keys."""
        return self._dict.keys()

    def __contains__(self, key) -> bool:
        return key in self._dict

    def __len__(self) -> int:
        return len(self._dict)

    def __setitem__(self, name: str, value):
        """
        Set an option in the local dictionary.

        Parameters
        ----------
        name : str
            name of the option.
        value : -
            value of the option to be value- and type-checked if declared.
        """
        if self._read_only:
            raise KeyError(f"Tried to set read-only option {name!r}.")

        try:
            meta = self._dict[name]
        except KeyError:
            # The key must have been declared.
            msg = f"Option {name!r} cannot be set because it has not been declared."
            raise KeyError(msg)

        self._assert_valid(name, value)

        meta["value"] = value
        meta["has_been_set"] = True

    def __getitem__(self, name: str):
        """
        Get an option from the dict or declared default.

        Parameters
        ----------
        name : str
            name of the option.

        Returns
        -------
        value : -
            value of the option.
        """
        try:
            meta = self._dict[name]
        except KeyError:
            raise KeyError(f"Option {name!r} cannot be found")

        if not meta["has_been_set"]:
            raise RuntimeError(f"Option {name!r} is required but has not been set.")

        return meta["value"]


class HasOptions:
    """Base class to handle options as `OptionsDictionary`."""

    __slots__ = ()  # do not provide the '_options' slot to allow multiple inheritence

    def _declare_options(self, options: OptionsDictionary) -> None:
        """Declares options in `options`."""
        pass

    def _init_options(self, kwargs: Dict[str, Any]) -> OptionsDictionary:
        """Creates a new options dictionary and sets its values by
        consuming matching entries of `kwargs`.
        """
        options = OptionsDictionary()
        self._declare_options(options)

        for key in list(options):
            if key in kwargs:
                options[key] = kwargs.pop(key)

        return options
