import random
import time

from seqstream import Stream


def read_sensor():
    while True:
        time.sleep(.001)
        yield 20 + random.gauss(0, 1)


readings = Stream.from_iterable(read_sensor())
smoothed = readings.slide(10).map(lambda w: sum(w) / len(w))

# nothing has been read so far, values are pulled on demand
t1 = time.time()
alerts = smoothed.enumerate() \
    .filter(lambda iv: abs(iv[1] - 20) > .5) \
    .take(5) \
    .to_list()
t2 = time.time()

for i, value in alerts:
    print("window {:4d}: {:.2f}".format(i, value))
print("took {:.1f}\"".format(t2 - t1))


# rerunning a pipeline over a list gives the same results
data = [random.random() for _ in range(1000)]
pipeline = Stream.from_iterable(data).chunk(100).map(max)
assert pipeline.to_list() == pipeline.to_list()
print("chunk maxima sorted:", pipeline.is_sorted())
