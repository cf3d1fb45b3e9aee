from animal_package import abstraction, classes

# Abstraction enforced by a constructor check
cat = abstraction.Cat()
cat.say()
dog = abstraction.Dog("Rex")
dog.say()

# Native abstract base class, Dog delegating to the generic sound
bruno = classes.Dog("Bruno")
bruno.speak()
tom = classes.Cat("Tom")
tom.speak()

# Abstract types cannot be built directly; this ends the demonstration
abstraction.Animal()
