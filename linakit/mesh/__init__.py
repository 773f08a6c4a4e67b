"""Point clouds, voxel grids, voxel plane fitting and typed sets."""