import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from model import AntennaType, VertexNotFoundError, load_graph
from network import AntennaOrientation


def main():
    parser = argparse.ArgumentParser(description='Shortest route between two sensors')
    parser.add_argument('--graph', required=True, help='Path to graph description file')
    parser.add_argument('--src', required=True, help='Source sensor name')
    parser.add_argument('--dst', required=True, help='Destination sensor name')
    parser.add_argument('--range', type=float, default=None, help='Sensor range (default: backbone)')
    parser.add_argument('--antenna', choices=[t.value for t in AntennaType],
                        default=AntennaType.DIRECTIONAL.value)
    args = parser.parse_args()

    aoa = AntennaOrientation(load_graph(args.graph))
    antenna_type = AntennaType(args.antenna)
    if args.range is not None:
        aoa.update_range(args.range, antenna_type)
    try:
        route = aoa.shortest_route(args.src, args.dst, antenna_type)
    except VertexNotFoundError as exc:
        sys.exit(str(exc))
    if route is None:
        sys.exit(f'no route from {args.src} to {args.dst}')
    print(' -> '.join(route.names))
    print(f'length {route.length:.2f}, {route.hops} hops')


if __name__ == '__main__':
    main()
