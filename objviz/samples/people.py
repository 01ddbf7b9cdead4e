"""
    People — a small social graph with spouses, shared kids and friends.
"""
from typing import List, Optional


class Person:
    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age
        self.spouse: Optional['Person'] = None
        self.kids: List['Person'] = []
        self.friends: List['Person'] = []

    def marry(self, other: 'Person') -> None:
        self.spouse = other
        other.spouse = self

    def __repr__(self) -> str:
        return f"Person({self.name!r}, {self.age})"


class PersonDB:
    def __init__(self, data: Optional[List[Person]] = None):
        self.data: List[Person] = list(data or [])


def build_family() -> Person:
    """
    Herbert and Karin share two kids; Alex is a friend of three people.
    Returns Herbert.
    """
    herbert = Person("Herbert", 56)
    karin = Person("Karin", 56)
    herbert.spouse = karin

    david = Person("David", 22)
    fabian = Person("Fabian", 24)
    alex = Person("Alex", 24)
    nico = Person("Nico", 20)

    herbert.kids.extend([david, fabian])
    karin.kids.extend([david, fabian])
    karin.friends.append(alex)
    david.friends.extend([alex, nico])
    herbert.friends.append(alex)
    return herbert
