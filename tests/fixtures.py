import random

SEED = 1459


def random_nickname(rand):
    """ Generate a valid nickname: a letter or special character first, with a digit on every third position. """
    length = rand.randint(1, 23)
    name = chr(rand.randint(65, 125))

    for i in range(1, length):
        if i % 3 == 0:
            name += chr(rand.randint(48, 57))
        else:
            name += chr(rand.randint(65, 125))

    return name


def random_invalid_nickname(rand):
    """ Generate a nickname that always contains at least one character outside the nickname alphabet. """
    length = rand.randint(1, 23)
    name = ''.join(chr(rand.randint(32, 254)) for _ in range(length))
    return name + 'µ'


def with_names(generator, count=500):
    """ Call the test once with a list of generated names, using a fixed seed so failures are reproducible. """
    def inner(f):
        def run():
            rand = random.Random(SEED)
            return f(names=[ generator(rand) for _ in range(count) ])

        run.__name__ = f.__name__
        return run
    return inner
