"""Distance functions, nearest-neighbour search, k-d tree, octree and plane fitting."""